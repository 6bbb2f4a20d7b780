""" Command-line access to pystr operations.

`pystr call METHOD TEXT [ARGS]...` applies one operation.
`pystr run SCRIPT` applies every call listed in a YAML script.
"""

import inspect
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import click
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from pystr import OPERATIONS
from pystr.common import CONFIG_PATH, RETURN_ERR, PyStrError
from pystr.transform import py_repr

log = logging.getLogger(__name__)

yaml = YAML(typ='safe')

_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]

Defaults = Dict[str, Dict[str, Any]]


class CliError(Exception):
    pass


def perr(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


# **** Configuration ****

def load_defaults(path: Optional[Path]) -> Defaults:
    """ Read per-method keyword defaults, e.g. `expandtabs: {tabsize: 4}`.

    :param path: Explicit config file, or None to try CONFIG_PATH.
    """
    if path is None:
        path = Path(CONFIG_PATH)
        if not path.exists():
            return {}

    with open(path) as f:
        defaults = yaml.load(f)
    if defaults is None:
        return {}

    if type(defaults) != dict:
        raise CliError(
            'invalid config file {}, must be YAML key-value map'.format(path.resolve()))
    for method, kwargs in defaults.items():
        if method not in OPERATIONS:
            raise CliError(f'invalid config file {path}, unknown method {method!r}')
        if type(kwargs) != dict:
            raise CliError(f'invalid config file {path}, {method} must map to keyword arguments')

    log.info('loaded defaults for %d methods from %s', len(defaults), path)
    return defaults


# **** Dispatch ****

_NULLS = ('~', 'null', 'Null', 'NULL')


def parse_arg(arg: str):
    """ Read one command-line argument as a YAML int, bool, null or sequence.

    Sequences become tuples, so `[a, b]` works as startswith's tuple form.
    Anything else, including text YAML cannot parse, stays a string;
    quote it (`"'3'"`) to pass a number as a string.
    """
    if not arg.strip():
        return arg
    try:
        value = yaml.load(arg)
    except YAMLError:
        return arg

    if value is None:
        return None if arg.strip() in _NULLS else arg
    if isinstance(value, list):
        return tuple(value)
    if isinstance(value, (int, str)):
        return value
    return arg


def apply(method: str, text: str, args: List, defaults: Defaults) -> Any:
    """ Call OPERATIONS[method](text, *args), filling unset keywords from defaults. """
    try:
        func = OPERATIONS[method]
    except KeyError:
        raise CliError(f'unknown method {method!r}') from None

    try:
        bound = inspect.signature(func).bind_partial(text, *args)
    except TypeError as e:
        raise CliError(f'{method}: {e}')

    kwargs = {
        key: value for key, value in defaults.get(method, {}).items()
        if key not in bound.arguments
    }
    log.debug('calling %s with args=%r kwargs=%r', method, args, kwargs)
    return func(text, *args, **kwargs)


def format_result(result) -> str:
    if isinstance(result, list):
        return '[' + ', '.join(py_repr(item) for item in result) + ']'
    return str(result)


# **** Commands ****

@click.group()
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), default=None,
              help='Per-method keyword defaults (defaults to {})'.format(CONFIG_PATH))
@click.option(*'verbose --verbose -v'.split(), count=True)
@click.pass_context
def main(ctx: click.Context, config: Optional[str], verbose: int):
    """ Apply Python string operations from the command line. """
    logging.basicConfig(level=_LEVELS[min(verbose, len(_LEVELS) - 1)])

    try:
        ctx.obj = load_defaults(Path(config) if config is not None else None)
    except (CliError, YAMLError) as e:
        perr('Error:', str(e))
        ctx.exit(RETURN_ERR)


@main.command(context_settings={'ignore_unknown_options': True})
@click.argument('method')
@click.argument('text')
@click.argument('args', nargs=-1)
@click.pass_context
def call(ctx: click.Context, method: str, text: str, args):
    """ Apply METHOD to TEXT. ARGS are read as YAML (`~` is None). """
    try:
        result = apply(method, text, [parse_arg(arg) for arg in args], ctx.obj)
    except (CliError, PyStrError) as e:
        perr('Error:', str(e))
        ctx.exit(RETURN_ERR)

    click.echo(format_result(result))


@main.command()
@click.argument('script', type=click.File('r'))
@click.pass_context
def run(ctx: click.Context, script):
    """ Apply each call in SCRIPT, a YAML map {text: ..., calls: [...]}.

    Each call is a map {method: ..., args: [...]}; args may be omitted.
    """
    try:
        doc = yaml.load(script)
    except YAMLError as e:
        perr('Error:', str(e))
        ctx.exit(RETURN_ERR)

    if type(doc) != dict or not isinstance(doc.get('text'), str):
        perr('Error: script must be a YAML map with a string "text" key')
        ctx.exit(RETURN_ERR)

    text = doc['text']
    for entry in doc.get('calls') or []:
        if type(entry) != dict or 'method' not in entry:
            perr('Error: each call must be a YAML map with a "method" key')
            ctx.exit(RETURN_ERR)

        method = entry['method']
        args = [tuple(arg) if isinstance(arg, list) else arg for arg in entry.get('args') or []]
        try:
            result = apply(method, text, args, ctx.obj)
        except (CliError, PyStrError) as e:
            perr('Error:', str(e))
            ctx.exit(RETURN_ERR)

        click.echo(f'{method}: {format_result(result)}')
