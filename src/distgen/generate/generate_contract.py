"""Generate a contract source file from its template."""

from distgen.generate.contract_file_io import read_template, write_output
from distgen.generate.generate_opts import GenerateOpts
from distgen.templates.template_renderer import render


def generate_contract(opts: GenerateOpts) -> str:
    """Render the template for ``opts.network`` and write the contract.

    Reads ``opts.template``, renders it with the network binding and writes
    the result to ``opts.output``. A failing step stops the run, so nothing
    is written unless the template read and rendered cleanly.

    Args:
        opts: Paths, network name and strictness for this run

    Returns:
        The output path that was written

    Raises:
        ContractFileError: If the template cannot be read or the output
            cannot be written
        TemplateSyntaxError: If the template is malformed
        TemplateRenderError: If a directive fails while rendering
        UnresolvedVariableError: If ``opts.strict`` is set and the template
            references a name other than ``network``
    """
    template = read_template(opts.template)
    rendered = render(template, opts.bindings(), strict=opts.strict, name=opts.template)
    write_output(opts.output, rendered)
    return opts.output
