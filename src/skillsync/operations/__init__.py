"""Engine operations: download, extract, install, doctor, update and diff."""
