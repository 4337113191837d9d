__version__ = '25.10.0'
_release = '1'
_commit = '3f2c9a1'
