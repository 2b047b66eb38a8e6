from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from ccmetrics.errors import FrontEndError
from ccmetrics.ir.reader import IRFunction, read_module

logger = logging.getLogger(__name__)

IR_SUFFIXES = {".ll"}


def emit_llvm_ir(
    source_path: str,
    clang: str = "clang",
    clang_args: Sequence[str] = (),
    output_path: Optional[str] = None,
) -> str:
    """Compile ``source_path`` to textual IR at -O0 and return the IR path."""
    ir_path = output_path or str(Path(source_path).with_suffix(".ll"))
    command = [clang, "-O0", "-S", "-emit-llvm", *clang_args, source_path, "-o", ir_path]
    logger.info("Running %s", " ".join(command))
    try:
        completed = subprocess.run(command, capture_output=True, text=True, check=False)
    except OSError as exc:
        raise FrontEndError(f"Cannot run {clang}: {exc}") from exc
    if completed.returncode != 0:
        detail = completed.stderr.strip()
        raise FrontEndError(f"failed to compile {source_path}" + (f": {detail}" if detail else ""))
    return ir_path


def load_module(
    path: str,
    clang: str = "clang",
    clang_args: Sequence[str] = (),
) -> List[IRFunction]:
    """Read an IR module, compiling C/C++ sources first."""
    if Path(path).suffix.lower() not in IR_SUFFIXES:
        path = emit_llvm_ir(path, clang=clang, clang_args=clang_args)
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FrontEndError(f"Error reading IR file {path}: {exc}") from exc
    return read_module(text)
