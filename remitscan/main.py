import argparse
import asyncio
import sys
from pathlib import Path

from remitscan.config.settings import Settings
from remitscan.content.file_loader import FileLoader
from remitscan.jobs.models import JobStatus
from remitscan.logging.logger import Log
from remitscan.report.formatter import format_job_line, format_progress, format_record
from remitscan.session import ExtractionSession, PreconditionError, SessionMode, build_session

EXIT_OK = 0
EXIT_JOB_FAILED = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="remitscan",
        description="Extract beneficiary and bank details from payment documents.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Documents to process")
    parser.add_argument(
        "--multi",
        action="store_true",
        help="Process files as independent jobs (implied by more than one file)",
    )
    return parser


async def _run_single(session: ExtractionSession) -> int:
    session.estimator.subscribe(lambda snapshot: print(format_progress(snapshot), file=sys.stderr))
    result = await session.process_single()
    if result is None:
        print(f"Error: {session.error}", file=sys.stderr)
        return EXIT_JOB_FAILED
    print(format_record(result, session.flags_for(result)))
    return EXIT_OK


async def _run_multi(session: ExtractionSession) -> int:
    session.store.subscribe(lambda job: print(format_job_line(job), file=sys.stderr))
    await session.process_multi()

    exit_code = EXIT_OK
    for job in session.store:
        if job.status is JobStatus.DONE and job.data is not None:
            print(f"=== {job.file.name} ===")
            print(format_record(job.data, session.flags_for(job.data)))
            print()
        else:
            print(format_job_line(job))
            exit_code = EXIT_JOB_FAILED
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> load files -> build session -> run one mode.

    Reports go to stdout; logs and progress go to stderr.
    """
    args = build_arg_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    try:
        files = FileLoader().load_many(args.files)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    session = build_session(settings)
    try:
        if args.multi or len(files) > 1:
            session.set_mode(SessionMode.MULTI)
            session.select_files(files)
            return asyncio.run(_run_multi(session))
        session.select_files(files)
        return asyncio.run(_run_single(session))
    except PreconditionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    finally:
        session.close()


if __name__ == "__main__":
    sys.exit(main())
