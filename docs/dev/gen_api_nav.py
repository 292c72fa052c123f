"""Generate the API reference pages and their literate-nav summary.

Run by MkDocs through the `mkdocs-gen-files` plugin (see `mkdocs.yml`):

- every package under `src/enlist` gets an index page listing its
  subpackages and modules, rendered above by mkdocstrings when the
  package has a docstring;
- every public module gets a page with a single mkdocstrings directive;
- `dev/api/SUMMARY.md` lists all pages for `mkdocs-literate-nav`.

Links in `SUMMARY.md` are relative to `dev/api/`. Files are parsed with
`ast`, never imported, so building the docs has no import-time side effects.
"""

import ast
from pathlib import Path

import mkdocs_gen_files
from mkdocs_gen_files.nav import Nav

SRC = Path("src")
PKG_ROOT = SRC / "enlist"
API_DIR = Path("dev") / "api"
NAV_FILE = API_DIR / "SUMMARY.md"

DIRECTIVE_OPTIONS = """\
    options:
      show_root_heading: true
      members_order: source
      docstring_style: google
      show_source: false
      filters:
        - '!^_'
"""

nav = Nav()


def has_docstring(py_path: Path) -> bool:
    """Return True if the file has a non-empty module-level docstring."""
    try:
        tree = ast.parse(py_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return False
    return bool(ast.get_docstring(tree))


def dotted_parts(py_path: Path) -> tuple[str, ...]:
    """``src/enlist/adapters/__init__.py`` -> ``("enlist", "adapters")``."""
    parts = py_path.relative_to(SRC).with_suffix("").parts
    return parts[:-1] if parts[-1] == "__init__" else parts


def is_public(parts: tuple[str, ...]) -> bool:
    return bool(parts) and not any(part.startswith("_") for part in parts)


def directive(module: str) -> str:
    return f"::: {module}\n{DIRECTIVE_OPTIONS}"


def publish(parts: tuple[str, ...], content: str) -> None:
    page = Path(*parts).with_suffix(".md")
    with mkdocs_gen_files.open(API_DIR / page, "w") as fh:
        fh.write(content)
    nav[parts] = page.as_posix()


def package_page(init: Path, parts: tuple[str, ...]) -> str:
    module = ".".join(parts)
    pkg_dir = init.parent
    modules = sorted(
        p.stem for p in pkg_dir.glob("*.py") if is_public((p.stem,))
    )
    packages = sorted(
        d.name
        for d in pkg_dir.iterdir()
        if d.is_dir() and is_public((d.name,)) and (d / "__init__.py").exists()
    )

    lines = [f"# `{module}`\n\n"]
    if has_docstring(init):
        lines.append(directive(module))
    for title, names in (("Subpackages", packages), ("Modules", modules)):
        if names:
            lines.append(f"\n## {title}\n")
            lines += [f"- [{name}]({parts[-1]}/{name}.md)\n" for name in names]
    return "".join(lines)


for py in sorted(PKG_ROOT.rglob("*.py")):
    parts = dotted_parts(py)
    if not is_public(parts):
        continue
    if py.name == "__init__.py":
        publish(parts, package_page(py, parts))
    else:
        publish(parts, f"# `{'.'.join(parts)}`\n\n{directive('.'.join(parts))}")

with mkdocs_gen_files.open(NAV_FILE, "w") as summary:
    summary.writelines(nav.build_literate_nav())
