# Constants and error types shared by every pystr layer.

DEFAULT_TABSIZE = 8
DEFAULT_FILLCHAR = ' '

# Optional YAML file of per-method keyword defaults, read by the CLI.
CONFIG_PATH = 'pystr.yaml'
RETURN_ERR = 1


class PyStrError(Exception):
    pass


class PyValueError(PyStrError, ValueError):
    pass


class PyIndexError(PyStrError, IndexError):
    pass


class PyTypeError(PyStrError, TypeError):
    pass
