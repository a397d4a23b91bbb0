from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from artifacts.generators import (
    PagesGenerator,
    SourcesGenerator,
    StaticGenerator,
    TutorialsGenerator,
)
from artifacts.models.artifacts.tutorials import TutorialRoot
from artifacts.render import Renderer
from artifacts.utils import _dumps, _write_json
from contract.artifacts import (
    DIST_DIR,
    DOCS_JSON,
    DOCS_RAW_JSON,
    MEMBERS_JSON,
    NAV_JSON,
    TREE_JSON,
)
from graph.graft import graft
from links.registry import LinkRegistry
from parse.doclets import parse_symbols, read_doclets
from parse.tutorials import load_tutorials
from rules.config import load_config, resolve_destination
from rules.prune import VisibilityPolicy, prune
from transform import (
    add_ancestors,
    assign_ids,
    attach_module_symbols,
    build_nav,
    build_nav_html,
    build_source_catalog,
    decorate_examples,
    decorate_see,
    get_members,
    link_event_listeners,
    normalize_constants,
    synthesize_signatures,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from artifacts.models.artifacts.symbols import Symbol
    from rules.config import PublishConfig
    from transform.sources import SourceCatalog

logger = logging.getLogger(__name__)


def populate_registry(
    symbols: Sequence[Symbol],
    catalog: SourceCatalog,
    tutorials: TutorialRoot,
    *,
    output_source_files: bool = True,
) -> LinkRegistry:
    """Build and freeze the link registry for one run.

    Reserved names are claimed by the registry itself; then every symbol,
    every source page and every tutorial gets its identifier.
    """
    registry = LinkRegistry()

    for symbol in symbols:
        registry.register(symbol.longname, registry.create_link(symbol))

    if output_source_files:
        for resolved in catalog.paths:
            shortened = catalog.files[resolved].shortened or resolved
            registry.register(shortened, registry.page_url(shortened))

    for tutorial in tutorials.walk():
        registry.register_tutorial(tutorial.name)

    registry.freeze()
    return registry


def _source_link_helper(registry: LinkRegistry) -> Callable[[Symbol], str]:
    def source_link(symbol: Symbol) -> str:
        meta = symbol.meta
        if meta is None or not meta.shortpath:
            return ""
        if meta.lineno is None:
            return registry.linkto(meta.shortpath, meta.shortpath)
        link = registry.linkto(
            meta.shortpath, meta.shortpath, fragment=f"line-{meta.lineno}"
        )
        return f"{link}, line {meta.lineno}"

    return source_link


def _resolve_under_root(root: Path, value: str | None) -> Path | None:
    if not value:
        return None
    path = Path(value)
    return path if path.is_absolute() else root / path


def publish(
    *,
    input_path: Path,
    root: Path,
    out_dir: Path | None = None,
    config: PublishConfig | None = None,
    tutorials_dir: Path | None = None,
) -> dict[str, object]:
    """Run the full publish pipeline over a doclet dump.

    Args:
        input_path: JSON file holding the parser's doclet list
        root: Project root; relative config paths are resolved against it
        out_dir: Optional output directory overriding ``destination``
        config: Optional configuration (default: loaded from ``root``)
        tutorials_dir: Optional tutorials directory overriding the config

    Returns:
        Dictionary with counts and the list of written files.
    """
    if config is None:
        config = load_config(root)

    raw = read_doclets(input_path)
    symbols = parse_symbols(raw)
    logger.info("loaded %d symbols from %s", len(symbols), input_path)

    symbols = prune(symbols, VisibilityPolicy.from_config(config))
    link_event_listeners(symbols)
    decorate_examples(symbols)
    catalog = build_source_catalog(symbols)

    tutorials_dir = tutorials_dir or _resolve_under_root(root, config.tutorials)
    tutorials = (
        load_tutorials(tutorials_dir, config.encoding)
        if tutorials_dir is not None
        else TutorialRoot()
    )

    registry = populate_registry(
        symbols,
        catalog,
        tutorials,
        output_source_files=config.templates.output_source_files,
    )

    decorate_see(symbols, registry)
    assign_ids(symbols, registry)
    synthesize_signatures(symbols, registry)
    add_ancestors(symbols, registry)
    symbols = normalize_constants(symbols)

    attach_module_symbols(symbols, [s for s in symbols if s.kind == "module"])
    members = get_members(symbols, tutorials.children)
    nav = build_nav(
        members, registry, use_longname=config.templates.use_longname_in_nav
    )
    tree = graft(symbols)

    if out_dir is None and config.to_console:
        sys.stdout.write(_dumps(symbols).decode("utf-8"))
        sys.stdout.write("\n")
        return {"symbol_count": len(symbols), "artifacts": []}

    if out_dir is None:
        out_dir = resolve_destination(root, config.destination)

    dist_dir = out_dir / DIST_DIR
    snapshots = [
        (DOCS_RAW_JSON, raw),
        (DOCS_JSON, symbols),
        (MEMBERS_JSON, members),
        (NAV_JSON, nav),
        (TREE_JSON, tree),
    ]
    written: list[str] = []
    for filename, payload in snapshots:
        _write_json(dist_dir / filename, payload)
        written.append(str(dist_dir / filename))

    renderer = Renderer(
        template_dir=_resolve_under_root(root, config.template),
        layout_file=_resolve_under_root(root, config.templates.layout_file),
        helpers={
            "linkto": registry.linkto,
            "tutorial_link": registry.tutorial_link,
            "source_link": _source_link_helper(registry),
        },
    )
    nav_html = build_nav_html(nav)

    generators = [
        (PagesGenerator(renderer, registry, nav_html), {"symbols": symbols, "members": members}),
        (TutorialsGenerator(renderer, registry, nav_html), {"tutorials": tutorials}),
        (StaticGenerator(renderer.static_dir, config.templates.static_files), {}),
    ]
    if config.templates.output_source_files:
        generators.append(
            (
                SourcesGenerator(renderer, registry, nav_html),
                {"catalog": catalog, "encoding": config.encoding},
            )
        )

    summary: dict[str, object] = {"symbol_count": len(symbols)}
    for generator, kwargs in generators:
        paths, counts = generator.generate(root, out_dir, **kwargs)
        logger.debug("%s generator wrote %d files", generator.name, len(paths))
        written.extend(paths)
        summary.update(counts)

    summary["artifacts"] = written
    return summary
