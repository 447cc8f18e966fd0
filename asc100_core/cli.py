"""ASC100 command line tool.

Usage:
    asc100 [--verbose] <command> [options]

Examples:
    asc100 encode "Hello, World!"              # Encode with environment defaults
    asc100 encode -s extensions "a #EOF#"      # Encode markers
    asc100 decode <encoded> --charset v4       # Decode with another charset
    asc100 compare "Héllo #NL# world"          # Compare strategies and filters
    asc100 charsets --preview 10               # List charset versions
"""

import sys

import click

from .charset import MARKERS, get_charset, list_charsets
from .codec import Asc100Codec, CodecConfig, EncodingStrategy, FilterPolicy
from .config import load_settings
from .exceptions import Asc100Error
from .logging import setup_logging
from .metrics import timed_decode, timed_encode

STRATEGY_CHOICES = [s.value for s in EncodingStrategy]
FILTER_CHOICES = [f.value for f in FilterPolicy]
ALPHABET_CHOICES = ["url_safe", "standard"]

# Strategy/filter pairs shown by `compare`
COMPARISONS = [
    (EncodingStrategy.CORE, FilterPolicy.STRICT),
    (EncodingStrategy.CORE, FilterPolicy.STRIP),
    (EncodingStrategy.EXTENSIONS, FilterPolicy.STRICT),
    (EncodingStrategy.EXTENSIONS, FilterPolicy.STRIP),
    (EncodingStrategy.EXTENSIONS, FilterPolicy.SANITIZE),
]


def codec_options(f):
    """Decorator to add the shared codec options."""
    f = click.option('--alphabet', '-a', type=click.Choice(ALPHABET_CHOICES, case_sensitive=False), default=None,
                     help='Output alphabet (default: ASC100_ALPHABET or url_safe)')(f)
    f = click.option('--filter', '-f', 'filter_policy', type=click.Choice(FILTER_CHOICES, case_sensitive=False),
                     default=None, help='Invalid character policy')(f)
    f = click.option('--strategy', '-s', type=click.Choice(STRATEGY_CHOICES, case_sensitive=False), default=None,
                     help='Encoding strategy')(f)
    f = click.option('--charset', '-c', default=None, help='Charset version (v1..v4 or full name)')(f)
    return f


def _read_input(value):
    if value is None or value == '-':
        data = sys.stdin.read()
        # drop only the newline the shell appends
        return data[:-1] if data.endswith('\n') else data
    return value


def _make_codec(charset, strategy, filter_policy, alphabet, strict_padding=False):
    settings = load_settings()
    try:
        return Asc100Codec(CodecConfig(
            charset=charset or settings.charset,
            strategy=strategy or settings.strategy,
            filter_policy=filter_policy or settings.filter_policy,
            alphabet=alphabet or settings.alphabet,
            strict_padding=strict_padding or settings.strict_padding,
        ))
    except Asc100Error as e:
        raise click.ClickException(str(e))


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show metrics and debug logs on stderr')
@click.pass_context
def cli(ctx, verbose):
    """ASC100 - compact 7-bit text encoding."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    setup_logging(
        service_name="asc100-cli",
        level="DEBUG" if verbose else "WARNING",
        json_output=False,
        stream=sys.stderr,
    )


@cli.command('encode')
@click.argument('text', required=False)
@codec_options
@click.pass_context
def cmd_encode(ctx, text, charset, strategy, filter_policy, alphabet):
    """Encode TEXT (or stdin when omitted or '-')."""
    codec = _make_codec(charset, strategy, filter_policy, alphabet)
    try:
        encoded, metrics = timed_encode(codec, _read_input(text))
    except Asc100Error as e:
        raise click.ClickException(str(e))

    click.echo(encoded)
    if ctx.obj['verbose']:
        click.echo(f"{codec!r}: {metrics.format_summary()}", err=True)


@cli.command('decode')
@click.argument('encoded', required=False)
@codec_options
@click.option('--strict-padding', is_flag=True, help='Reject non-canonical padding')
@click.pass_context
def cmd_decode(ctx, encoded, charset, strategy, filter_policy, alphabet, strict_padding):
    """Decode ENCODED (or stdin when omitted or '-')."""
    codec = _make_codec(charset, strategy, filter_policy, alphabet, strict_padding)
    try:
        decoded, metrics = timed_decode(codec, _read_input(encoded).strip())
    except Asc100Error as e:
        raise click.ClickException(str(e))

    click.echo(decoded)
    if ctx.obj['verbose']:
        click.echo(f"{codec!r}: {metrics.format_summary()}", err=True)


@cli.command('charsets')
@click.option('--preview', '-p', default=0, type=int, help='Show the first N entries of each')
def cmd_charsets(preview):
    """List charset versions."""
    default = get_charset(load_settings().charset).name
    for name in list_charsets():
        flag = '*' if name == default else ' '
        click.echo(f"{flag} {name}")
        if preview:
            for line in get_charset(name).preview(preview).splitlines():
                click.echo(f"      {line}")


@cli.command('markers')
def cmd_markers():
    """List marker tokens available under the extensions strategy."""
    for marker in MARKERS:
        click.echo(f"  {marker.index:3d}  {marker.token:8} {marker.description}")


@cli.command('compare')
@click.argument('text', required=False)
@click.option('--charset', '-c', default=None, help='Charset version')
def cmd_compare(text, charset):
    """Encode TEXT under each strategy/filter pair and compare the results."""
    text = _read_input(text)
    charset = charset or load_settings().charset
    click.echo(f"Input: {len(text)} chars")

    for strategy, policy in COMPARISONS:
        label = f"{strategy.value}/{policy.value}"
        try:
            codec = Asc100Codec(CodecConfig(charset=charset, strategy=strategy, filter_policy=policy))
            encoded, metrics = timed_encode(codec, text)
            roundtrip = codec.decode(encoded)
        except Asc100Error as e:
            click.echo(f"  {label:22} error: {e}")
            continue
        exact = 'yes' if roundtrip == text else 'no'
        click.echo(
            f"  {label:22} {len(encoded):6d} chars  {metrics.format_summary()}  exact={exact}"
        )


if __name__ == '__main__':
    cli()
