"""Build-time compiler from YAML record files to literal Python modules."""
