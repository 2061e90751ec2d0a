"""Render contract templates with Jinja2.

Templates use ``{{ name }}`` placeholders (plus any other Jinja2 directive).
Rendering is a pure string transform: nothing is read from or written to disk
here, and the same template and bindings always give the same text.

Names a template references but the bindings do not supply render as the empty
string and are reported through :class:`UnresolvedVariableWarning`, unless
``strict=True`` is passed, in which case :class:`UnresolvedVariableError` is
raised instead.
"""

import re
import warnings
from collections.abc import Mapping

import jinja2
from jinja2 import meta


_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class TemplateSyntaxError(ValueError):
    """A placeholder or directive in the template could not be parsed."""

    def __init__(self, message: str, lineno: int, name: str | None = None):
        self.message = message
        self.lineno = lineno
        self.name = name
        location = f"{name}, line {lineno}" if name else f"line {lineno}"
        super().__init__(f"Template syntax error ({location}): {message}")


class TemplateRenderError(ValueError):
    """A directive parsed but failed while the template was rendered."""

    def __init__(self, message: str, name: str | None = None):
        self.message = message
        self.name = name
        label = f" ({name})" if name else ""
        super().__init__(f"Template render error{label}: {message}")


class UnresolvedVariableError(ValueError):
    """The template references names with no binding (strict rendering)."""

    def __init__(self, names: list[str], message: str | None = None):
        self.names = names
        super().__init__(message or _undefined_message(names))


class UnresolvedVariableWarning(UserWarning):
    """The template references names with no binding; they rendered empty."""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(_undefined_message(names))


def _undefined_message(names):
    return f"template references undefined variable(s): {', '.join(names)}"


def _newline_sequence(source: str) -> str:
    """Line ending of the template's first line break ("\\n" when it has none)."""
    match = _LINE_BREAK.search(source)
    return match.group(0) if match else "\n"


def _environment(source: str) -> jinja2.Environment:
    return jinja2.Environment(
        autoescape=False,
        keep_trailing_newline=True,
        newline_sequence=_newline_sequence(source),
        undefined=jinja2.ChainableUndefined,
    )


def _syntax_error(exc: jinja2.TemplateSyntaxError, name: str | None) -> TemplateSyntaxError:
    return TemplateSyntaxError(exc.message or "invalid syntax", exc.lineno, name)


def _analyse(template: str, bindings: Mapping[str, object], name: str | None):
    """Parse ``template`` and list the names it references that are unbound."""
    env = _environment(template)
    try:
        ast = env.parse(template, name=name)
    except jinja2.TemplateSyntaxError as exc:
        raise _syntax_error(exc, name) from exc
    referenced = meta.find_undeclared_variables(ast)
    unresolved = sorted(n for n in referenced if n not in bindings and n not in env.globals)
    return env, ast, unresolved


def find_unresolved(template: str, bindings: Mapping[str, object]) -> list[str]:
    """Return the sorted names ``template`` references that ``bindings`` lacks.

    Raises:
        TemplateSyntaxError: If the template is malformed.
    """
    return _analyse(template, bindings, None)[2]


def render(
    template: str,
    bindings: Mapping[str, object],
    *,
    strict: bool = False,
    name: str | None = None,
) -> str:
    """Substitute ``bindings`` into ``template`` and return the rendered text.

    Args:
        template: Template source text.
        bindings: Mapping of variable names to values. Values are inserted
            as ``str(value)`` without any escaping.
        strict: Raise instead of warning when a referenced name is unbound.
        name: Label for the template in error messages (usually its path).

    Returns:
        The rendered text.

    Raises:
        TemplateSyntaxError: If a placeholder or directive is malformed,
            including unknown filters.
        UnresolvedVariableError: If ``strict`` is set and a referenced name
            is unbound, or an unbound value is used in a way that cannot
            render empty (e.g. called).
        TemplateRenderError: If evaluating a directive fails, such as an
            ``include`` or an operation on incompatible values.
    """
    env, ast, unresolved = _analyse(template, bindings, name)
    if unresolved and strict:
        raise UnresolvedVariableError(unresolved)

    try:
        compiled = env.from_string(ast)
    except jinja2.TemplateSyntaxError as exc:
        raise _syntax_error(exc, name) from exc

    try:
        rendered = compiled.render(dict(bindings))
    except jinja2.UndefinedError as exc:
        raise UnresolvedVariableError(unresolved, str(exc)) from exc
    except (jinja2.TemplateError, TypeError, ValueError, ArithmeticError) as exc:
        raise TemplateRenderError(str(exc), name) from exc

    if unresolved:
        warnings.warn(UnresolvedVariableWarning(unresolved), stacklevel=2)
    return rendered
