"""Entry point: solve homework and print both answers."""

import sys
from dataclasses import replace

from loguru import logger

from api.schemas import HomeworkReport
from application.config import Settings, load_settings
from domain.exceptions import HomeworkError
from domain.models import HomeworkResult
from services import create_homework_service

USAGE = "usage: homework [INPUT | -] [--json] [--log-level LEVEL]"


def apply_arguments(settings: Settings, argv: list[str]) -> Settings:
    """Override settings with command line arguments."""
    args = list(argv)

    if "--json" in args:
        args.remove("--json")
        settings = replace(settings, output_format="json")

    if "--log-level" in args:
        idx = args.index("--log-level")
        if idx + 1 >= len(args):
            raise ValueError("--log-level requires a value")
        settings = replace(settings, log_level=args[idx + 1].upper())
        del args[idx : idx + 2]

    unknown = [arg for arg in args if arg.startswith("--")]
    if unknown or len(args) > 1:
        raise ValueError(f"Unexpected arguments: {' '.join(args)}")

    if args:
        settings = replace(settings, input_path=args[0])
    return settings


def render(result: HomeworkResult, output_format: str) -> str:
    if output_format == "json":
        return HomeworkReport.from_result(result).model_dump_json(indent=2)

    return "\n".join(
        [
            result.part1.format_report(),
            "",
            result.part2.format_report(),
            "",
            f"ans part1: {result.part1_total}",
            f"ans part2: {result.part2_total}",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the homework solver."""
    try:
        settings = apply_arguments(load_settings(), sys.argv[1:] if argv is None else argv)

        # Setup logging
        logger.remove()
        logger.add(sys.stderr, level=settings.log_level)
    except ValueError as e:
        print(f"{e}\n{USAGE}", file=sys.stderr)
        return 2

    service = create_homework_service()
    try:
        result = service.solve_file(settings.input_path)
    except HomeworkError as e:
        logger.opt(exception=e).debug("Homework run aborted")
        print(f"Failed to solve homework: {e}", file=sys.stderr)
        return 1

    print(render(result, settings.output_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
