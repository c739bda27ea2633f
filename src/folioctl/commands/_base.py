"""Click command classes that carry worked examples.

``examples=`` text is kept off ``--help``; the help epilog points at
``--examples``, which prints the text and exits before any argument
checks run.
"""

from __future__ import annotations

from typing import Any

import click

EXAMPLES_HINT = "Run with --examples for sample invocations."


class _ExamplesMixin:
    examples: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples.rstrip() if examples else None

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params: list[click.Parameter] = super().get_params(ctx)  # type: ignore[misc]
        if self.examples:
            params.insert(-1, self._examples_option())
        return params

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text(EXAMPLES_HINT)

    def _examples_option(self) -> click.Option:
        text = self.examples or ""

        def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if value and not ctx.resilient_parsing:
                click.echo(f"Examples for '{ctx.command_path}':\n\n{text}")
                ctx.exit(0)

        return click.Option(
            ["--examples"],
            is_flag=True,
            is_eager=True,
            expose_value=False,
            callback=show,
            help="Show usage examples and exit.",
        )


class FolioCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class FolioGroup(_ExamplesMixin, click.Group):
    """Group whose ``@group.command()`` children are :class:`FolioCommand`."""

    command_class = FolioCommand
    group_class = type

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
