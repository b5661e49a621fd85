"""Link Typer app factory."""

import typer

from mdlinks.api.link.cmd_render import cmd_render
from mdlinks.api.link.cmd_resolve import cmd_resolve
from mdlinks.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Resolve and render markdown links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="resolve")
    def resolve_cmd(
        containing: str = typer.Argument(..., help="Markdown file the link is written in"),
        target: str = typer.Argument(..., help="Link target as written"),
        root: str | None = typer.Option(None, "--root", help="Project root (default: configured root)"),
        loose: bool = typer.Option(False, "--loose", help="Prefix name match and loose extensions"),
        only_local: bool = typer.Option(False, "--only-local", help="Only local files"),
        only_remote: bool = typer.Option(False, "--only-remote", help="Only remote (repository) forms"),
        only_uri: bool = typer.Option(False, "--only-uri", help="Render results as URIs"),
        prefer_local: bool = typer.Option(False, "--prefer-local", help="Local forms first, then remote URLs"),
        wiki_ref: bool = typer.Option(False, "--wiki-ref", help="Render wiki pages by page name"),
        markdown_only: bool = typer.Option(False, "--markdown-only", help="Only markdown files"),
        wiki_link: bool = typer.Option(False, "--wiki-link", help="Target is the text of a [[wiki link]]"),
    ) -> None:
        """Resolve a link target to ranked matches."""
        selected = {
            "LOOSE_MATCH": loose,
            "ONLY_LOCAL": only_local,
            "ONLY_REMOTE": only_remote,
            "ONLY_URI": only_uri,
            "PREFER_LOCAL": prefer_local,
            "WANT_WIKI_REF": wiki_ref,
            "ONLY_MARKDOWN": markdown_only,
        }
        flags = [name for name, enabled in selected.items() if enabled]
        _handle_stage_result(cmd_resolve)(
            containing_file=containing, target=target, flags=flags, root=root, wiki_link=wiki_link
        )

    @app.command(name="render")
    def render_cmd(
        containing: str = typer.Argument(..., help="Markdown file the link will be written in"),
        target_file: str = typer.Argument(..., help="File the link should reach"),
        root: str | None = typer.Option(None, "--root", help="Project root (default: configured root)"),
        anchor: str | None = typer.Option(None, "--anchor", help="Anchor to append"),
    ) -> None:
        """Render the link text from one file to another."""
        _handle_stage_result(cmd_render)(containing_file=containing, target_file=target_file, root=root, anchor=anchor)

    return app
