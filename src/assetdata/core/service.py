from __future__ import annotations

"""
Asset Data Service.

Runs the per-request pipeline (resolve each asset root for the current page,
scan it, aggregate) and exposes the host hook that injects the result into a
template context.
"""

import logging
from typing import Any, Dict, List, MutableMapping, Optional, Tuple

from assetdata.core.aggregator import aggregate
from assetdata.core.diagnostics import DiagnosticsReporter
from assetdata.core.resolver import build_scan_base, resolve_effective_root
from assetdata.core.scanner import StructuredDataParser, count_nodes, scan_directory
from assetdata.core.validator import validate_config
from assetdata.domain.config import ResolverConfig
from assetdata.domain.tree_models import AssetData, ScanResult

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_asset_data(
        config: ResolverConfig,
        page_id: Optional[str],
        *,
        parser: Optional[StructuredDataParser] = None,
        reporter: Optional[DiagnosticsReporter] = None,
) -> AssetData:
    """
    Resolve and scan every configured asset root for one page.

    Args:
        config: Validated resolver configuration.
        page_id: Current page identifier, or None.
        parser: Structured-data parser override.
        reporter: Diagnostics collaborator; defaults to one following config.debug_mode.

    Returns:
        AssetData: The aggregated output.

    Raises:
        StructuredDataError: If an inlined structured-data file is malformed.
    """
    reporter = reporter or DiagnosticsReporter(enabled=config.debug_mode)
    reporter.roots_found(config.asset_roots)

    scanned: List[Tuple[str, ScanResult]] = []
    for root in config.asset_roots:
        effective_root = resolve_effective_root(root, page_id, config)
        scan_base = build_scan_base(config.site_base_folder, effective_root)

        node = scan_directory(
            scan_base, "", config.max_depth, config, parser=parser, reporter=reporter
        )
        if node is None:
            reporter.root_missing(scan_base)
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Scanned '{scan_base}': {count_nodes(node)}")
        scanned.append((effective_root, node))

    result = aggregate(scanned)
    reporter.final_output(result)
    return result

# -----------------------------------------------------------------------------
# HOST INTEGRATION
# -----------------------------------------------------------------------------

class AssetDataPlugin:
    """
    Template engine hook exposing 'asset_base' and 'assets'.

    The host calls on_config_loaded once with its raw site configuration and
    on_page_rendering for every page it renders.
    """

    def __init__(
            self,
            parser: Optional[StructuredDataParser] = None,
            reporter: Optional[DiagnosticsReporter] = None,
    ) -> None:
        self.config = ResolverConfig()
        self._parser = parser
        self._reporter = reporter

    def on_config_loaded(self, raw_config: Optional[Dict[str, Any]]) -> ResolverConfig:
        """
        Validate and store the site configuration.

        Args:
            raw_config: Site configuration mapping.

        Returns:
            ResolverConfig: The validated configuration.
        """
        self.config, warnings = validate_config(raw_config)
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")
        return self.config

    def on_page_rendering(
            self,
            template_vars: MutableMapping[str, Any],
            page_id: Optional[str],
    ) -> AssetData:
        """
        Inject the asset variables for the page being rendered.

        Args:
            template_vars: Template context, updated in place.
            page_id: Identifier of the page being rendered, or None.

        Returns:
            AssetData: The injected data.
        """
        reporter = self._reporter or DiagnosticsReporter(enabled=self.config.debug_mode)
        data = build_asset_data(self.config, page_id, parser=self._parser, reporter=reporter)
        template_vars.update(data.to_context())
        return data
