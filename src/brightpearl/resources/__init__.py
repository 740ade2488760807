"""
brightpearl.resources

Packaged JSON service description resources (`service-config.json` + one file per
sub-service). Read through `brightpearl.description.resources.PackageResourceLoader`.
"""
