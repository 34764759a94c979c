"""auto_route_supply_air_grills

Pair the outlets of an air distribution box with the supply-air grills on
the same duct system and plan one route segment per pair.

Usage:
    auto-route-grills \
        --model model.json \
        --device-id ADB-1 \
        --report-out output/routing.json \
        --plot-out output/pairing.png \
        --log-level INFO
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from common.cli import add_config_arg, add_log_level_arg, parse_args_with_config, setup_logging
from common.logging import CountingHandler
from exceptions.exceptions import StepPreconditionError
from grill_pairing.application.use_case import AutoRouteSupplyAirGrillsUseCase
from grill_pairing.domain.geometry import EPSILON
from grill_pairing.domain.mep import MepModel
from grill_pairing.domain.routing import AutoRoutingSummary, RoutingStatus
from grill_pairing.domain.services import ConnectorPairingService
from grill_pairing.entrypoints.pairing import GEOMETRY_BACKENDS, geometry_backend
from grill_pairing.infrastructure.filesystem import JsonMepModelSource, JsonRoutingReportStore
from grill_pairing.infrastructure.memory import StaticMepModelSource
from grill_pairing.ports import RoutingReportStore
from validation.validate_model import validate_model
from validation.validation_helpers import log_issues

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NOTHING_ROUTED = 2


def auto_route_supply_air_grills(
    *,
    model: MepModel,
    device_id: str,
    report_store: Optional[RoutingReportStore] = None,
    epsilon: float = EPSILON,
    default_route_name_base: str = "Duct",
    require_supply_air: bool = True,
    backend: str = "numpy",
) -> AutoRoutingSummary:
    """Entrypoint to auto-route one distribution box.

    This is the composition root for the grill pairing context.
    It wires up all dependencies and runs the use case.
    """
    pairing_service = ConnectorPairingService(backend=geometry_backend(backend), epsilon=epsilon)

    use_case = AutoRouteSupplyAirGrillsUseCase(
        model_source=StaticMepModelSource(model),
        pairing_service=pairing_service,
        report_store=report_store,
        default_route_name_base=default_route_name_base,
        require_supply_air=require_supply_air,
    )
    return use_case.run(device_id=device_id)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pair distribution box outlets with supply air grills and plan routes")
    add_config_arg(parser)
    add_log_level_arg(parser)
    parser.add_argument("--model", help="Path to the MEP model JSON file")
    parser.add_argument("--device-id", required=True, help="Element id of the air distribution box")
    parser.add_argument("--report-out", help="Write the routing summary as JSON to this path")
    parser.add_argument("--plot-out", help="Write a plan-view plot of the pairing to this path")
    parser.add_argument("--epsilon", type=float, help="Length / plane tolerance (default: 1e-9)")
    parser.add_argument("--backend", choices=sorted(GEOMETRY_BACKENDS), help="Geometry backend (default: numpy)")
    parser.add_argument("--route-name-base", help="Route name prefix when the outlet has no system name")
    return parser


def _run(args, cfg) -> int:
    if not args.model:
        raise StepPreconditionError("MODEL_NOT_SET", "No model path given (--model or paths.model_path)", context="main")

    model = JsonMepModelSource(Path(args.model)).load()

    issues = validate_model(model)
    if log_issues(issues, "error"):
        logging.error("Model validation failed: %s", args.model)
        return EXIT_FAILED

    report_store = JsonRoutingReportStore(Path(args.report_out)) if args.report_out else None

    summary = auto_route_supply_air_grills(
        model=model,
        device_id=args.device_id,
        report_store=report_store,
        epsilon=float(args.epsilon),
        default_route_name_base=args.route_name_base,
        require_supply_air=cfg.routing.require_supply_air,
        backend=args.backend,
    )

    if summary.status is not RoutingStatus.OK:
        logging.warning("Nothing routed for %s: %s", args.device_id, summary.status.value)
        return EXIT_NOTHING_ROUTED

    for segment in summary.segments:
        logging.info("%s: %s -> %s (%.3f)", segment.route_name, segment.from_connector_id,
                     segment.to_connector_id, segment.straight_length)

    if args.plot_out:
        from grill_pairing.infrastructure.plotting import save_pairing_plot
        save_pairing_plot(summary.pairing, summary.frame, args.plot_out,
                          title=f"{args.device_id} outlet / grill pairing",
                          dpi=cfg.plot.dpi, annotate=cfg.plot.annotate)
    return EXIT_OK


def main(argv: Optional[list] = None) -> int:
    def _defaults_from_cfg(cfg):
        return dict(
            model=cfg.paths.model_path or None,
            report_out=cfg.paths.report_out,
            plot_out=cfg.paths.plot_out,
            log_level=cfg.logging.level,
            epsilon=cfg.pairing.epsilon,
            backend=cfg.pairing.backend,
            route_name_base=cfg.routing.default_route_name_base,
        )

    args, cfg = parse_args_with_config(build_parser, _defaults_from_cfg, argv)
    setup_logging(args.log_level)

    counter = CountingHandler()
    logging.getLogger().addHandler(counter)
    try:
        code = _run(args, cfg)
    except StepPreconditionError as e:
        logging.error("%s: %s", e.code, str(e))
        code = EXIT_FAILED
    finally:
        logging.getLogger().removeHandler(counter)

    logging.debug("Finished with %d warning(s), %d error(s)", counter.warnings, counter.errors)
    if code == EXIT_OK and counter.has_errors:
        code = EXIT_FAILED
    return code


if __name__ == "__main__":
    raise SystemExit(main())
