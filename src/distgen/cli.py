"""Click command for the distgen CLI."""

import warnings

import click

from distgen.generate.contract_file_io import with_error_handling
from distgen.generate.generate_contract import generate_contract
from distgen.generate.generate_opts import (
    DEFAULT_NETWORK,
    DEFAULT_OUTPUT,
    DEFAULT_TEMPLATE,
    GenerateOpts,
)
from distgen.templates.template_renderer import UnresolvedVariableWarning

VERSION = "0.0.1"
COMPLETION_MESSAGE = "MerkleDistributor file updated."


def _report_warnings(caught):
    """Echo unresolved-variable warnings to stderr; pass the rest through."""
    for w in caught:
        if issubclass(w.category, UnresolvedVariableWarning):
            click.echo(f"Warning: {w.message}", err=True)
        else:
            warnings.showwarning(w.message, w.category, w.filename, w.lineno)


@click.command("distgen")
@click.version_option(VERSION, "-V", "--version", prog_name="distgen")
@click.option("-t", "--template", default=DEFAULT_TEMPLATE, show_default=True,
              help="MerkleDistributor template file.")
@click.option("-o", "--output", default=DEFAULT_OUTPUT, show_default=True,
              help="Generated MerkleDistributor.sol file.")
@click.option("--network", default=DEFAULT_NETWORK, show_default=True,
              help="Network name bound to {{ network }} in the template.")
@click.option("--strict", is_flag=True, default=False,
              help="Fail when the template references an undefined variable.")
def main(template, output, network, strict):
    """Generate the MerkleDistributor contract for a network."""
    opts = GenerateOpts(template=template, output=output, network=network, strict=strict)
    with with_error_handling():
        caught = []
        try:
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always", UnresolvedVariableWarning)
                generate_contract(opts)
        finally:
            _report_warnings(caught)
    click.echo(COMPLETION_MESSAGE)
