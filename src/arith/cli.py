"""
arith CLI - Entry point.

Reads one expression (argument or prompt), evaluates it, and prints
``<expr> = <result>``.
"""

from __future__ import annotations

import json
import logging
import math
import platform
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.tree import Tree

from arith._version import get_version
from arith.core.calculator import format_number, format_result
from arith.core.config import CalcConfig, load_config
from arith.core.errors import ArithError
from arith.core.expression_lang.evaluator import evaluate
from arith.core.expression_lang.parser import parse
from arith.core.expression_lang.tokenizer import tokenize
from arith.core.ir.expressions import AstNode, BinaryExpr, Number, UnaryExpr

console = Console()

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"arith {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""arith – evaluate arithmetic expressions

Supports + - * /, parentheses, implicit multiplication like 2(3 + 4),
and digit grouping like 1,000 or 1_000.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to arith.toml (default: ./arith.toml)"),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
) -> None:
    """arith CLI main callback for global options."""
    try:
        settings = load_config(config)
    except ArithError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = settings


@app.command("eval")
def eval_command(
    ctx: typer.Context,
    expression: Annotated[
        str | None,
        typer.Argument(help="Expression to evaluate; prompts when omitted. Use -- before a leading '-'."),
    ] = None,
    show_tokens: Annotated[
        bool, typer.Option("--show-tokens", help="Print the token stream before the result")
    ] = False,
    show_ast: Annotated[
        bool, typer.Option("--show-ast", help="Print the parsed expression tree before the result")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
) -> None:
    """Evaluate one arithmetic expression."""
    settings: CalcConfig = ctx.obj or CalcConfig()

    if expression is None:
        expression = typer.prompt(settings.prompt)
    expr = expression.strip()

    try:
        tokens = tokenize(expr)
        tree = parse(tokens)
    except ArithError as e:
        e.with_source(expr)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if show_tokens or settings.show_tokens:
        for tok in tokens:
            typer.echo(repr(tok))
    if show_ast or settings.show_ast:
        console.print(_render_tree(tree))

    result = evaluate(tree)
    logger.debug("Evaluated %r to %r", expr, result)

    if as_json:
        # JSON has no inf or NaN; non-finite results go out as null with their display text
        payload = {
            "expression": expr,
            "result": result if math.isfinite(result) else None,
            "display": format_number(result),
        }
        typer.echo(json.dumps(payload, allow_nan=False))
    else:
        typer.echo(format_result(expr, result))


def _render_tree(node: AstNode, tree: Tree | None = None) -> Tree:
    """Build a rich Tree mirroring the expression AST."""
    if isinstance(node, Number):
        label = f"[cyan]{node}[/cyan]"
    elif isinstance(node, BinaryExpr):
        label = f"[bold]{node.op.value}[/bold]"
    else:
        label = f"[bold]unary {node.op.value}[/bold]"

    branch = Tree(label) if tree is None else tree.add(label)
    if isinstance(node, BinaryExpr):
        _render_tree(node.left, branch)
        _render_tree(node.right, branch)
    elif isinstance(node, UnaryExpr):
        _render_tree(node.operand, branch)
    return branch


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
