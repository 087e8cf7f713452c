import argparse
import logging
from pathlib import Path
from typing import List, Optional

import colorlog

from object_validation import __version__ as _PACKAGE_VERSION
from object_validation.validation import runner
from object_validation.validation.errors import ConfigurationError


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _report_path(option, data_path: Path, suffix: str) -> Path:
    """Resolve where a report for ``data_path`` is written.

    ``True`` (flag given without a value) places the report next to the data
    file; a string is used as the output directory.
    """
    if option is True:
        report_dir = data_path.parent
    else:
        report_dir = Path(option)
        report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir / f"{data_path.stem}_validation.{suffix}"


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate one or more records files against a configuration.

    Every file is validated independently. Missing files only emit warnings,
    and the command runs as long as at least one file was validated.

    Returns:
        0 if all records passed validation
        1 if no files were validated
        2 if any validation errors were found, or the configuration is unusable
    """
    try:
        config = runner.load_config(args.config)
    except ValueError as e:
        logging.error("Cannot load validation config: %s", e)
        return 2

    # Track results for end-of-run summary
    validation_results: List[dict] = []
    total_errors = 0
    successful_validations = 0

    for data_arg in args.data:
        data_path = Path(data_arg)
        logging.info("Validating %s...", data_path)

        try:
            report = runner.run_validation(data_path, config, config_reference=args.config)
        except FileNotFoundError as e:
            logging.warning("Records file not found: %s", e)
            validation_results.append(
                {"path": data_path.name, "status": "MISSING", "errors": 0, "reason": str(e)}
            )
            continue
        except ConfigurationError as e:
            logging.error("Invalid validation config %s: %s", args.config, e)
            return 2
        except (ValueError, OSError) as e:
            logging.error("Error validating %s: %s", data_path, e)
            validation_results.append(
                {"path": data_path.name, "status": "ERROR", "errors": 0, "reason": str(e)}
            )
            continue

        has_errors = report.has_errors()
        error_count = report.get_error_count()

        if has_errors:
            total_errors += error_count
            logging.warning(
                "Validation failed for %s: %d errors in %d records",
                data_path.name,
                error_count,
                len(report.get_failed_records()),
            )
        else:
            logging.info("Validation passed for %s", data_path.name)

        # Print console report
        runner.print_report(report)

        # Generate markdown report if requested
        if getattr(args, "report", None):
            report_path = _report_path(args.report, data_path, "md")
            with open(report_path, "w", encoding="utf-8") as f:
                f.write(report.to_markdown())
            logging.info("Markdown report saved: %s", report_path)

        # Generate JSON report if requested
        if getattr(args, "report_json", None):
            report_path = _report_path(args.report_json, data_path, "json")
            with open(report_path, "w", encoding="utf-8") as f:
                f.write(report.to_json())
            logging.info("JSON report saved: %s", report_path)

        successful_validations += 1
        validation_results.append(
            {"path": data_path.name, "status": "FAIL" if has_errors else "OK", "errors": error_count}
        )

    # Print summary if multiple files
    if len(args.data) > 1 and validation_results:
        logging.info("Validation Summary:")
        for entry in validation_results:
            if entry["status"] == "OK":
                logging.info("%s: PASSED", entry["path"])
            elif entry["status"] == "FAIL":
                logging.info("%s: FAILED (%d errors)", entry["path"], entry["errors"])
            else:
                logging.info("%s: %s (%s)", entry["path"], entry["status"], entry["reason"])

    if successful_validations == 0:
        logging.error("No records files were validated.")
        return 1

    if any(entry["status"] == "ERROR" for entry in validation_results):
        return 2

    return 2 if total_errors > 0 else 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="object-validation",
        description=f"Object Validation (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate records files against a config")
    p_validate.add_argument(
        "data",
        nargs="+",
        help="Records files to validate (.csv, .json, .yaml or .yml)",
    )
    p_validate.add_argument(
        "--config",
        required=True,
        help="Validation config reference, e.g. myapp.forms:SIGNUP_CONFIG",
    )
    p_validate.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=False,
        help="Write a Markdown report next to each data file, or into the given directory",
    )
    p_validate.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help="Write a JSON report next to each data file, or into the given directory",
    )
    p_validate.set_defaults(func=cmd_validate)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
