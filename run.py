import sys
from argparse import ArgumentParser, ArgumentTypeError, RawTextHelpFormatter
from typing import Optional

from geoprecision.domain.exceptions import DomainException
from geoprecision.domain.services.rounding_service import RoundingService
from geoprecision.domain.values import ModelKind, PrecisionModel
from geoprecision.shared.config import get_settings
from geoprecision.shared.logging import configure_logging, get_logger

settings = get_settings()

configure_logging(
    log_level=settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS
)

logger = get_logger(__name__)


def parse_kind(value: str) -> ModelKind:
    try:
        return ModelKind.from_name(value)
    except DomainException as e:
        raise ArgumentTypeError(str(e)) from e


def add_model_arguments(parser: ArgumentParser, prefix: str = "") -> None:
    parser.add_argument(
        f"--{prefix}kind",
        type=parse_kind,
        default=None,
        help="Precision model kind [FIXED, FLOATING, FLOATING_SINGLE].",
    )
    parser.add_argument(
        f"--{prefix}scale",
        type=float,
        default=None,
        help="Scale of a fixed model; a negative value is the grid size.",
    )


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Coordinate precision model toolkit",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    describe_parser = subparsers.add_parser("describe", help="Describe a precision model.")
    add_model_arguments(describe_parser)
    describe_parser.set_defaults(func=run_describe)

    round_parser = subparsers.add_parser("round", help="Round values to a precision model.")
    add_model_arguments(round_parser)
    round_parser.add_argument("values", nargs="+", type=float, help="Values to round.")
    round_parser.set_defaults(func=run_round)

    compare_parser = subparsers.add_parser(
        "compare",
        aliases=["most-precise"],
        help="Print the more precise of two precision models."
    )
    add_model_arguments(compare_parser)
    add_model_arguments(compare_parser, prefix="other-")
    compare_parser.set_defaults(func=run_compare)

    return parser


def build_model(kind: Optional[ModelKind], scale: Optional[float]) -> PrecisionModel:
    if kind is None and scale is None:
        return settings.default_precision_model()

    if scale is not None and kind in (None, ModelKind.FIXED):
        return PrecisionModel.fixed(scale)

    return PrecisionModel.of_kind(kind)


def describe(model: PrecisionModel) -> str:
    return (
        f"{model}\n"
        f"grid size: {model.grid_size()}\n"
        f"maximum significant digits: {model.get_maximum_significant_digits()}"
    )


def run_describe(args) -> None:
    model = build_model(args.kind, args.scale)
    logger.debug("model_built", model=str(model))

    print(describe(model))


def run_round(args) -> None:
    service = RoundingService(build_model(args.kind, args.scale))

    for value in service.normalize_values(args.values):
        print(repr(value))


def run_compare(args) -> None:
    first = build_model(args.kind, args.scale)
    second = build_model(args.other_kind, args.other_scale)

    winner = PrecisionModel.most_precise(first, second)
    logger.debug("models_compared", first=str(first), second=str(second), winner=str(winner))

    print(winner)


def main() -> None:
    parser = setup_arg_parser()
    args = parser.parse_args()

    logger.info("command_starting", command=args.command)

    try:
        args.func(args)
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            exc_info=True
        )
        sys.exit(1)

    logger.info("command_completed", command=args.command)
    sys.exit(0)


if __name__ == "__main__":
    main()
