"""Link resolve API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkResolveOutput
from ..config.AtlasConfig import AtlasConfig
from ..StageResult import StageResult
from .LinkResolver import LinkResolver
from .load_targets import load_targets
from .ResolveResult import Unresolved


def cmd_resolve(ids: list[str], targets_file: str | None = None) -> StageResult:
    """Resolve a fallback chain of ids against the link targets."""

    def _fail(result_obj: StageResult, message: str) -> None:
        result_obj.output = LinkResolveOutput(
            errors=[message],
            warnings=[],
            ids=list(ids),
            status="unresolved",
            matched_id=ids[0] if ids else "",
            target=None,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading link targets...")
        try:
            targets_path = Path(targets_file).expanduser() if targets_file else AtlasConfig.load().targets_path
            targets = load_targets(targets_path)
        except (OSError, ValueError) as e:
            _fail(result_obj, f"Cannot load targets: {e}")
            return

        yield (0.6, "Resolving...")
        result = LinkResolver(targets).resolve_first(ids)

        yield (1.0, "Complete")
        if isinstance(result, Unresolved):
            _fail(result_obj, f"Unresolved magic link: {result.id}")
            return

        warnings = []
        if result.status == "placeholder":
            warnings.append(f"Target '{result.target.id}' is a placeholder")
        result_obj.output = LinkResolveOutput(
            errors=[],
            warnings=warnings,
            ids=list(ids),
            status=result.status,
            matched_id=result.matched_id,
            target=result.target.model_dump(mode="json"),
        ).model_dump(mode="python")
        result_obj.result = f"{result.matched_id} -> {result.target.url}"
        result_obj.success = True

    return StageResult(announce=f"Resolving {' | '.join(ids)}...", progress_callback=do_work)
