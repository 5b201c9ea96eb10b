import json
import time
from typing import Any, Dict, Optional

from reduse.core.config import WalkerConfiguration
from reduse.core.walker import TreeWalker
from reduse.utils.workspace import confirm_directory, normalize_workspace_path

def run_walk(
    workspace: str,
    *,
    image_format: str = "webp",
    fix_imports: bool = False,
    config: Optional[WalkerConfiguration] = None,
) -> Dict[str, Any]:
    config = config or WalkerConfiguration()
    root = normalize_workspace_path(workspace, max_path_length=config.max_path_length)
    confirm_directory(root)

    walker = TreeWalker(config=config)
    started = time.time()
    result = walker.walk(root)
    elapsed = round(time.time() - started, 4)

    files = result.as_list()
    # conversion and import fixing consume this list once they exist
    return {
        "workspace": root,
        "format": image_format,
        "fix_imports": fix_imports,
        "total_files": len(files),
        "recognized_files": sum(1 for f in files if walker.path_filter.is_recognized(f)),
        "files": files,
        "failures": [str(failure) for failure in result.failures],
        "elapsed_seconds": elapsed,
    }

def render(report: Dict[str, Any], as_json: bool) -> str:
    if as_json:
        return json.dumps(report, indent=2)

    lines = [
        "Starting Reduse using the following options:",
        "",
        f"Workspace Directory: {report['workspace']}",
        f"Format: {report['format']}",
        f"Fix Imports: {'true' if report['fix_imports'] else 'false'}",
        "",
        f"Files found: {report['total_files']}",
    ]
    lines.extend(f"File {i}: {path}" for i, path in enumerate(report["files"]))

    if report["failures"]:
        lines.append("")
        lines.append(f"Failures: {len(report['failures'])}")
        lines.extend(report["failures"])

    return "\n".join(lines)
