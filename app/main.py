import typer
from rich.console import Console
from rich.table import Table

from app.config.settings import Settings
from app.form.session import FormSession
from app.logging.logger import Log
from app.lookup.exceptions import PostalCodeLookupError, PostalCodeNotFoundError
from app.lookup.factory import PostalCodeLookupFactory
from app.masking.masker import mask_document_number, mask_postal_code, strip_non_digits
from app.records.models import NormalizedRecord
from app.storage.exceptions import StorageError
from app.storage.factory import RecordStoreFactory
from app.storage.repository import CadastroRepository
from app.validation.checksum import is_valid_document_number
from app.validation.models import FieldErrors, Invalid

app = typer.Typer(no_args_is_help=True, help="Registration form: masking, validation and storage.")
_console = Console()

_FIELD_LABELS = {
    "name": "Nome",
    "document_number": "CPF",
    "birth_date": "Data de nascimento",
    "email": "E-mail",
    "postal_code": "CEP",
    "street": "Logradouro",
    "district": "Bairro",
    "city": "Cidade",
    "state": "Estado",
}


def _repository(settings: Settings, *, ephemeral: bool = False) -> CadastroRepository:
    return CadastroRepository(RecordStoreFactory.create(settings, ephemeral=ephemeral))


def _render_errors(errors: FieldErrors, title: str = "Erros de validação") -> None:
    table = Table(title=title)
    table.add_column("Campo", style="bold")
    table.add_column("Mensagem", style="red")
    for field_name, message in errors.items():
        table.add_row(_FIELD_LABELS.get(field_name, field_name), message)
    _console.print(table)


def _render_records(records: list[NormalizedRecord]) -> None:
    table = Table(title=f"Cadastros ({len(records)})")
    table.add_column("#", justify="right")
    table.add_column("Nome")
    table.add_column("CPF")
    table.add_column("Idade", justify="right")
    table.add_column("E-mail")
    table.add_column("CEP")
    table.add_column("Cidade/UF")
    for index, record in enumerate(records):
        location = "/".join(part for part in (record.city, record.state) if part)
        table.add_row(
            str(index),
            record.name,
            record.document_number,
            str(record.age),
            record.email,
            record.postal_code,
            location,
        )
    _console.print(table)


@app.command()
def mask(
    kind: str = typer.Argument(..., help="cpf or cep"),
    value: str = typer.Argument(..., help="Raw input"),
) -> None:
    """Print VALUE formatted with the CPF or CEP mask."""
    kind = kind.lower()
    if kind == "cpf":
        _console.print(mask_document_number(value))
    elif kind == "cep":
        _console.print(mask_postal_code(value))
    else:
        raise typer.BadParameter("kind must be 'cpf' or 'cep'")


@app.command(name="check-cpf")
def check_cpf(value: str = typer.Argument(..., help="CPF, with or without mask")) -> None:
    """Check the CPF check digits."""
    if is_valid_document_number(value):
        _console.print(f"[green]{mask_document_number(value)} válido[/green]")
        return
    _console.print(f"[red]{value} inválido[/red]")
    raise typer.Exit(code=1)


@app.command()
def lookup(cep: str = typer.Argument(..., help="CEP, with or without mask")) -> None:
    """Look up the address of a CEP."""
    settings = Settings()
    digits = strip_non_digits(cep)
    if len(digits) != 8:
        _console.print("[red]CEP inválido[/red]")
        raise typer.Exit(code=1)
    try:
        with PostalCodeLookupFactory.create(settings) as client:
            address = client.lookup(digits)
    except PostalCodeNotFoundError:
        _console.print("[red]CEP inválido[/red]")
        raise typer.Exit(code=1)
    except PostalCodeLookupError as exc:
        _console.print(f"[red]Erro ao buscar CEP:[/red] {exc}")
        raise typer.Exit(code=2)
    _console.print(f"{address.street}, {address.district} - {address.city}/{address.state}")


@app.command()
def submit(
    name: str = typer.Option("", "--name"),
    cpf: str = typer.Option("", "--cpf"),
    birth_date: str = typer.Option("", "--birth-date", help="YYYY-MM-DD"),
    email: str = typer.Option("", "--email"),
    cep: str = typer.Option("", "--cep"),
    street: str = typer.Option("", "--street"),
    district: str = typer.Option("", "--district"),
    city: str = typer.Option("", "--city"),
    state: str = typer.Option("", "--state"),
    fetch_address: bool = typer.Option(
        False, "--lookup", help="Fill address fields from the CEP before validating."
    ),
    ephemeral: bool = typer.Option(
        False, "--ephemeral", help="Keep the record in memory instead of the store file."
    ),
) -> None:
    """Fill the form, validate it and save the record."""
    settings = Settings()
    address_lookup = PostalCodeLookupFactory.create(settings) if fetch_address else None
    session = FormSession(
        lookup=address_lookup,
        repository=_repository(settings, ephemeral=ephemeral),
        success_ttl_ms=settings.success_message_ttl_ms,
    )
    session.set_field("name", name)
    session.type_document_number(cpf)
    session.set_field("birth_date", birth_date)
    session.set_field("email", email)
    session.type_postal_code(cep)
    session.set_field("street", street)
    session.set_field("district", district)
    session.set_field("city", city)
    session.set_field("state", state)
    try:
        if address_lookup is not None and not session.lookup_address():
            if "postal_code" in session.errors:
                _render_errors(dict(session.errors), title="Avisos do CEP")
        result = session.submit()
    except StorageError as exc:
        _console.print(f"[red]Não foi possível salvar:[/red] {exc}")
        raise typer.Exit(code=2)
    finally:
        if address_lookup is not None:
            address_lookup.close()

    if isinstance(result, Invalid):
        _render_errors(result.errors)
        raise typer.Exit(code=1)
    _console.print(f"[green]{session.success_message}[/green]")
    if session.last_record is not None:
        _render_records([session.last_record])


@app.command(name="list")
def list_records() -> None:
    """List saved records."""
    _render_records(_repository(Settings()).list_all())


@app.command()
def delete(index: int = typer.Argument(..., help="Position shown by 'list'")) -> None:
    """Delete the saved record at INDEX."""
    try:
        removed = _repository(Settings()).delete(index)
    except IndexError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    except StorageError as exc:
        _console.print(f"[red]Não foi possível salvar:[/red] {exc}")
        raise typer.Exit(code=2)
    _console.print(f"Removido: {removed.name} ({removed.document_number})")


@app.callback()
def _configure(
    log_level: str | None = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
) -> None:
    Log.configure(log_level or Settings().log_level)


def run() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    run()
