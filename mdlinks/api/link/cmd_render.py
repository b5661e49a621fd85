"""Link render API command."""

from collections.abc import Iterator

from ...utils import normalize_path
from .._output_schemas.link import LinkRenderOutput
from ..StageResult import StageResult
from ._load_project import _load_project
from .FileRef import FileRef
from .FileReferenceLink import FileReferenceLink


def cmd_render(containing_file: str, target_file: str, root: str | None = None, anchor: str | None = None) -> StageResult:
    """Render the link text that reaches ``target_file`` from ``containing_file``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            _, project = _load_project(root)
        except (ValueError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = LinkRenderOutput(
                errors=[str(e)], warnings=[], link="", link_no_ext="", is_wiki_page=False, remote_url=""
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Rendering link...")
        source = FileRef(normalize_path(containing_file).as_posix())
        target = FileRef(normalize_path(target_file).as_posix())
        link = FileReferenceLink(source, target, project=project)

        warnings: list[str] = []
        if project.find(target.path) is None:
            warnings.append(f"Target file is not part of the project: {target.path}")

        yield (1.0, "Complete")
        rendered = link.link_ref_with_anchor(anchor)
        result_obj.result = f"Link: {rendered}"
        result_obj.output = LinkRenderOutput(
            errors=[],
            warnings=warnings,
            link=rendered,
            link_no_ext=link.link_ref_no_ext,
            is_wiki_page=link.is_wiki_page,
            remote_url=link.remote_url or "",
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Rendering link to {target_file}...", progress_callback=do_work)
