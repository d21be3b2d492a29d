"""End-to-end example that drives a CPI binary through the cpi_client Python API."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

try:
    from cpi_client import CallableCommandExecutor, CloudError, TransportError, make_client
except ModuleNotFoundError as error:  # pragma: no cover - documentation helper
    if "cpi_client" not in (error.name or ""):
        raise
    project_root = Path(__file__).resolve().parents[1]
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))
    from cpi_client import CallableCommandExecutor, CloudError, TransportError, make_client


def _subprocess_transport(cpi_path: Path) -> Callable[[str], str]:
    def _run(payload: str) -> str:
        completed = subprocess.run(
            [str(cpi_path)],
            input=payload,
            capture_output=True,
            check=False,
            text=True,
            shell=False,
        )
        if completed.returncode != 0:
            error_message = f"{cpi_path} exited with status {completed.returncode}: {completed.stderr.strip()}"
            raise OSError(error_message)
        return completed.stdout

    return _run


def main() -> None:
    """Print the capabilities of the CPI named by ``CPI_PATH``."""
    console = Console()
    cpi_path = Path(os.environ.get("CPI_PATH", "/var/vcap/jobs/cpi/bin/cpi"))

    client = make_client(CallableCommandExecutor(_subprocess_transport(cpi_path)))
    info = client.info()
    console.print(f"CPI at [path]{cpi_path}[/path] speaks API version {info.api_version}")
    console.print_json(info.model_dump_json(indent=2))

    stemcell_image = os.environ.get("STEMCELL_IMAGE")
    if not stemcell_image:
        return
    try:
        stemcell_cid = client.create_stemcell(stemcell_image, {})
    except CloudError as error:
        console.print(f"[red]{error.type}[/red]: {error.message}")
        return
    except TransportError as error:
        console.print(f"[red]CPI could not be run[/red]: {error}")
        return
    console.print(f"Uploaded stemcell [bold]{stemcell_cid}[/bold]")


if __name__ == "__main__":
    main()
