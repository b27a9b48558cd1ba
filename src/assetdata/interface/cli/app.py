from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Loads the site configuration, applies command-line overrides, runs the asset
data pipeline for one page and prints the template variables as JSON.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from assetdata.core.service import build_asset_data
from assetdata.core.validator import validate_config
from assetdata.domain.config import load_config_file
from assetdata.domain.errors import ConfigError, StructuredDataError
from assetdata.infra.logging import LoggingConfig, configure_logging, get_logger
from assetdata.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_DATA_ERROR = 1
EXIT_CONFIG_ERROR = 2

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "WARNING", console=True))

    # 1. Base configuration (site config file or defaults)
    raw_conf: Dict[str, Any] = {}
    if args.config_path:
        try:
            raw_conf = load_config_file(args.config_path)
        except ConfigError as e:
            logger.error(str(e))
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR

    # 2. Overrides and validation
    raw_conf = _merge_config(raw_conf, cli_args.args_to_overrides(args))
    config, warnings = validate_config(raw_conf)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(asdict(config), ensure_ascii=False, indent=2))
        return EXIT_OK

    # 3. Pipeline
    logger.debug(f"Resolving assets for page {args.page_id!r} in {config.site_base_folder}")
    try:
        result = build_asset_data(config, args.page_id)
    except StructuredDataError as e:
        logger.error(f"Structured data error: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_DATA_ERROR

    print(json.dumps(result.to_context(), ensure_ascii=False, indent=2, default=str))
    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())
