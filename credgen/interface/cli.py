"""Command-line interface: ``generate-oauth``."""

import click

from credgen.application.usecase.credentials import (
    GenerateCredentialsRequest,
    GenerateCredentialsUseCase,
)
from credgen.config import load_settings
from credgen.domain.error import ValidationError
from credgen.domain.model import (
    DEFAULT_ENCODING,
    DEFAULT_ID_LENGTH,
    DEFAULT_ID_PREFIX,
    DEFAULT_SECRET_LENGTH,
    CredentialPair,
)
from credgen.domain.service import CredentialService
from credgen.domain.value import EncodingFormat
from credgen.util.error import ConfigurationError
from credgen.util.logging import get_logger, setup_logging
from credgen.util.observability import configure_logfire
from credgen.util.version import get_version

logger = get_logger(__name__)

EPILOG = """\b
Examples:
  generate-oauth
  generate-oauth --prefix myapp
  generate-oauth --prefix prod --id-length 32 --secret-length 64
  generate-oauth --encoding hex --json

\b
The defaults shown above can be overridden with environment variables
(or a .env file): CREDGEN_DEFAULTS__ID_PREFIX, CREDGEN_DEFAULTS__ID_LENGTH,
CREDGEN_DEFAULTS__SECRET_LENGTH and CREDGEN_DEFAULTS__ENCODING.
"""

SECURITY_REMINDER = (
    "⚠️  Store these securely! "
    "The secret should never be committed to version control."
)


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(get_version() or "Version information not available")
    ctx.exit(0)


def format_credentials(credentials: CredentialPair, as_json: bool) -> str:
    """Render credentials for the console.

    Args:
        credentials: Generated credential pair
        as_json: Emit only a JSON object with ``clientId``/``clientSecret``

    Returns:
        Text to print on stdout
    """
    if as_json:
        return credentials.model_dump_json(by_alias=True, indent=2)

    return "\n".join(
        [
            "",
            "🔐 OAuth Credentials Generated:",
            "",
            f"Client ID:     {credentials.client_id}",
            f"Client Secret: {credentials.client_secret}",
            "",
            SECURITY_REMINDER,
            "",
        ]
    )


@click.command(
    name="generate-oauth",
    epilog=EPILOG,
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option(
    "-p",
    "--prefix",
    "id_prefix",
    metavar="<string>",
    default=None,
    show_default=repr(DEFAULT_ID_PREFIX),
    help="Prefix for OAuth ID",
)
@click.option(
    "--id-length",
    type=int,
    metavar="<number>",
    default=None,
    show_default=str(DEFAULT_ID_LENGTH),
    help="Length of random part of ID",
)
@click.option(
    "--secret-length",
    type=int,
    metavar="<number>",
    default=None,
    show_default=str(DEFAULT_SECRET_LENGTH),
    help="Length of secret",
)
@click.option(
    "--encoding",
    metavar="<string>",
    default=None,
    show_default=repr(DEFAULT_ENCODING.value),
    help="Encoding format: " + ", ".join(map(repr, EncodingFormat.choices())),
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "-v",
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help="Show version number",
)
def generate_oauth(
    id_prefix: str | None,
    id_length: int | None,
    secret_length: int | None,
    encoding: str | None,
    as_json: bool,
) -> None:
    """Generate an OAuth client ID and client secret."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(settings)
    configure_logfire(settings)

    defaults = settings.defaults
    request = GenerateCredentialsRequest(
        id_prefix=defaults.id_prefix if id_prefix is None else id_prefix,
        id_length=defaults.id_length if id_length is None else id_length,
        secret_length=(
            defaults.secret_length if secret_length is None else secret_length
        ),
        encoding=defaults.encoding if encoding is None else encoding,
    )

    use_case = GenerateCredentialsUseCase(CredentialService())
    try:
        response = use_case.execute(request)
    except ValidationError as e:
        logger.debug(f"Rejected options: {e.field}")
        raise click.ClickException(e.message) from e

    click.echo(format_credentials(response.credentials, as_json))


def main() -> None:
    """Console script entry point."""
    generate_oauth()


if __name__ == "__main__":
    main()
