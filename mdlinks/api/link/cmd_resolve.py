"""Link resolve API command."""

from collections.abc import Iterator

from ...utils import normalize_path
from .._output_schemas.link import LinkResolveOutput
from ..StageResult import StageResult
from ._load_project import _load_project
from .FileRef import FileRef
from .GitHubLinkResolver import GitHubLinkResolver
from .LinkRef import LinkRef
from .ResolveFlags import LOOSE_MATCH, ResolveFlags


def cmd_resolve(
    containing_file: str,
    target: str,
    flags: list[str] | None = None,
    root: str | None = None,
    wiki_link: bool = False,
) -> StageResult:
    """Resolve a link target written in ``containing_file``.

    Args:
        containing_file: Markdown file the link appears in
        target: Raw link target, or the inner text of ``[[...]]`` with ``wiki_link``
        flags: Resolve flag names such as ``ONLY_URI`` or ``LOOSE_MATCH``
        root: Project root; defaults to the configured one
    """
    flag_names = list(flags or [])

    def _fail(result_obj: StageResult, containing: str, message: str) -> None:
        result_obj.result = message
        result_obj.output = LinkResolveOutput(
            errors=[message],
            warnings=[],
            containing_file=containing,
            target=target,
            flags=flag_names,
            matches=[],
            matcher={},
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        containing = normalize_path(containing_file).as_posix()

        yield (0.1, "Parsing flags...")
        try:
            resolve_flags = ResolveFlags.from_names(flag_names)
        except ValueError as e:
            yield (1.0, "Complete")
            _fail(result_obj, containing, str(e))
            return

        yield (0.2, "Loading configuration...")
        try:
            config, project = _load_project(root)
        except (ValueError, OSError) as e:
            yield (1.0, "Complete")
            _fail(result_obj, containing, str(e))
            return

        if config.resolve.loose_match:
            resolve_flags = resolve_flags | LOOSE_MATCH

        yield (0.6, "Resolving link...")
        containing_ref = FileRef(containing)
        resolver = GitHubLinkResolver(
            project,
            containing_ref,
            markdown_extensions=tuple(config.resolve.markdown_extensions),
            github_links=tuple(config.resolve.github_links),
        )
        link_ref = LinkRef.wiki_link(containing_ref, target) if wiki_link else resolver.link_ref(target)
        resolved = resolver.multi_resolve_with_matcher(link_ref, resolve_flags)

        warnings: list[str] = []
        if project.find(containing) is None:
            warnings.append(f"Containing file is not part of the project: {containing}")

        yield (1.0, "Complete")
        count = len(resolved.matches)
        result_obj.result = f"Found {count} match(es) for '{target}'" if count else f"No matches for '{target}'"
        result_obj.output = LinkResolveOutput(
            errors=[],
            warnings=warnings,
            containing_file=containing,
            target=target,
            flags=resolve_flags.names,
            matches=resolved.matches,
            matcher=resolved.matcher.to_dict() if resolved.matcher is not None else {},
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Resolving '{target}' from {containing_file}...", progress_callback=do_work)
