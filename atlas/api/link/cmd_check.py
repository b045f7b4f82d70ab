"""Link check API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkCheckOutput
from ..config.AtlasConfig import AtlasConfig
from ..StageResult import StageResult
from .check_links import check_links
from .load_targets import load_targets


def cmd_check(
    content_dir: str | None = None,
    targets_file: str | None = None,
    patterns: list[str] | None = None,
) -> StageResult:
    """Check magic links in a content directory.

    Arguments left as None are taken from ``atlas.json``.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        content_path = Path(content_dir).expanduser() if content_dir else None
        targets_path = Path(targets_file).expanduser() if targets_file else None
        file_patterns = patterns or None

        if content_path is None or targets_path is None:
            yield (0.1, "Loading configuration...")
            try:
                config = AtlasConfig.load()
            except ValueError as e:
                result_obj.output = LinkCheckOutput(
                    errors=[str(e)],
                    warnings=[],
                    content_dir=str(content_path or ""),
                    files_checked=0,
                    broken=[],
                    placeholders=[],
                ).model_dump(mode="python")
                result_obj.result = f"Configuration error: {e}"
                result_obj.success = False
                return
            content_path = content_path or config.content_path
            targets_path = targets_path or config.targets_path
            file_patterns = file_patterns or config.patterns

        yield (0.3, "Loading link targets...")
        try:
            targets = load_targets(targets_path)
        except (OSError, ValueError) as e:
            result_obj.output = LinkCheckOutput(
                errors=[f"Cannot load targets: {e}"],
                warnings=[],
                content_dir=str(content_path),
                files_checked=0,
                broken=[],
                placeholders=[],
            ).model_dump(mode="python")
            result_obj.result = f"Cannot load targets from {targets_path}"
            result_obj.success = False
            return

        yield (0.5, f"Scanning {content_path} for magic links...")
        try:
            checked = check_links(content_path, targets, file_patterns)
        except (OSError, UnicodeDecodeError) as e:
            result_obj.output = LinkCheckOutput(
                errors=[f"Cannot read content: {e}"],
                warnings=[],
                content_dir=str(content_path),
                files_checked=0,
                broken=[],
                placeholders=[],
            ).model_dump(mode="python")
            result_obj.result = f"Error scanning {content_path}: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = LinkCheckOutput(
            errors=[f"{f.file}:{f.line}: broken link '{f.id}'" for f in checked.broken],
            warnings=[f"{f.file}:{f.line}: placeholder link '{f.id}'" for f in checked.placeholders],
            content_dir=str(content_path),
            files_checked=checked.files_checked,
            broken=[f.to_dict() for f in checked.broken],
            placeholders=[f.to_dict() for f in checked.placeholders],
        ).model_dump(mode="python")
        result_obj.success = not checked.broken
        result_obj.result = (
            f"Checked {checked.files_checked} files: "
            f"{len(checked.broken)} broken, {len(checked.placeholders)} placeholder links"
        )

    return StageResult(announce="Checking magic links...", progress_callback=do_work)
