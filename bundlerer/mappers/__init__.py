from bundlerer.mappers.resources import ResourcesProjectMapper
