"""Validate layer import boundaries for whisper_spell."""

from __future__ import annotations

import ast
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
PACKAGE = "whisper_spell"
DEFAULT_SOURCE_ROOT = PROJECT_ROOT / "src" / PACKAGE
KNOWN_LAYERS = {"adapters", "application", "cli", "core", "domain"}
# layer -> layers it must never import
RULES: dict[str, set[str]] = {
    "domain": {"adapters", "application", "cli", "core"},
    "core": {"adapters", "application", "cli"},
    "application": {"cli"},
}


def _layer_for_path(path: Path, source_root: Path) -> str | None:
    try:
        relative = path.relative_to(source_root)
    except ValueError:
        return None
    if len(relative.parts) < 2:
        return None
    return relative.parts[0]


def _module_parts(path: Path, source_root: Path) -> list[str]:
    relative = path.relative_to(source_root).with_suffix("")
    return [PACKAGE, *relative.parts]


def _imported_modules(
    node: ast.Import | ast.ImportFrom, path: Path, source_root: Path
) -> list[str]:
    if isinstance(node, ast.Import):
        return [alias.name for alias in node.names]

    if node.level == 0:
        base = node.module or ""
    else:
        package_parts = _module_parts(path, source_root)[:-1]
        if node.level - 1 > len(package_parts):
            return []
        kept = package_parts[: len(package_parts) - (node.level - 1)]
        base = ".".join([*kept, *(node.module.split(".") if node.module else [])])
    if base == PACKAGE:
        return [f"{PACKAGE}.{alias.name}" for alias in node.names]
    return [base]


def _layer_of_module(module_name: str) -> str | None:
    parts = module_name.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE:
        return None
    return parts[1] if parts[1] in KNOWN_LAYERS else None


def check_file(path: Path, source_root: Path = DEFAULT_SOURCE_ROOT) -> list[str]:
    layer = _layer_for_path(path, source_root)
    banned_layers = RULES.get(layer or "", set())
    if not banned_layers:
        return []

    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    violations: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        imported_layers = {
            imported
            for imported in (
                _layer_of_module(name) for name in _imported_modules(node, path, source_root)
            )
            if imported is not None
        }
        for imported_layer in sorted(imported_layers & banned_layers):
            violations.append(f"{path}: {layer} must not import {PACKAGE}.{imported_layer}")
    return violations


def check_import_boundaries(source_root: Path = DEFAULT_SOURCE_ROOT) -> list[str]:
    violations: list[str] = []
    for path in sorted(source_root.rglob("*.py")):
        violations.extend(check_file(path, source_root))
    return violations


def main() -> None:
    violations = check_import_boundaries()
    if violations:
        raise SystemExit("\n".join(violations))
    print("import boundary checks passed")


if __name__ == "__main__":
    main()
