"""
main.py - Audio Full Cut - headless entry point: detect silence and export the cut file
"""

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication, QTimer

from config import APP, AUDIO
from fullcut.application.services import EditService, ExportService
from fullcut.infrastructure.audio import AudioFileLoader, RmsSilenceDetector
from fullcut.presentation.workers import ExportThread

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line options."""
    parser = argparse.ArgumentParser(
        description=f"{APP.Info.FULL_NAME}: remove silent stretches without touching the source file.",
        epilog=APP.Info.DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('input_file', help="Input audio file.")
    parser.add_argument(
        '-o', '--output', dest='output_file', default=None,
        help="Output WAV path (default: <input>_cut.wav next to the input)."
    )
    parser.add_argument(
        '-t', '--threshold', type=float, default=AUDIO.Detection.THRESHOLD,
        help=f"RMS silence threshold 0-1 (default {AUDIO.Detection.THRESHOLD})."
    )
    parser.add_argument(
        '-m', '--min-duration', type=float, default=AUDIO.Detection.MIN_DURATION,
        help=f"Minimum silence length in seconds (default {AUDIO.Detection.MIN_DURATION})."
    )
    parser.add_argument(
        '-p', '--padding', type=float, default=AUDIO.Detection.PADDING,
        help=f"Audio kept at each edge of a silence in seconds (default {AUDIO.Detection.PADDING})."
    )
    parser.add_argument(
        '-n', '--dry-run', action='store_true',
        help="Only report detected regions; write nothing."
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help="Enable debug logging."
    )
    parser.add_argument(
        '--version', action='version',
        version=f"{APP.Info.NAME} {APP.Info.VERSION}"
    )
    return parser


def setup_logging(verbose: bool):
    """Configure root logging per LoggingConfig."""
    if verbose:
        logging.basicConfig(level=APP.Logging.VERBOSE_LEVEL, format=APP.Logging.VERBOSE_FORMAT)
    else:
        logging.basicConfig(level=APP.Logging.DEFAULT_LEVEL, format=APP.Logging.FORMAT)


def run_export(app: QCoreApplication, thread: ExportThread) -> int:
    """Run an export thread inside the Qt event loop; return the exit code."""
    result = {'code': 1}

    def on_progress(percentage, message):
        logger.info(f"Progress: {percentage}% - {message}")

    def on_completed(export_info):
        logger.info(
            f"✓ Written {export_info['output_path']}: "
            f"{export_info['source_duration']:.2f}s -> {export_info['output_duration']:.2f}s"
        )
        result['code'] = 0

    def on_failed(error_message):
        logger.error(error_message)
        result['code'] = 1

    thread.progress_updated.connect(on_progress)
    thread.export_completed.connect(on_completed)
    thread.export_failed.connect(on_failed)
    thread.finished.connect(app.quit)

    QTimer.singleShot(0, thread.start)
    app.exec()
    thread.wait()
    return result['code']


def main(argv=None) -> int:
    """Main function."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    input_path = Path(args.input_file)
    if not input_path.is_file():
        logger.error(f"File not found: {input_path}")
        return 1

    buffer = AudioFileLoader().load(input_path)
    if buffer is None:
        return 1

    detector = RmsSilenceDetector(
        threshold=args.threshold,
        min_duration=args.min_duration,
        padding=args.padding,
    )
    session = EditService(detector=detector)
    session.open_buffer(buffer, source_name=input_path.name)
    session.auto_mark_silence()

    for region in session.region_set:
        logger.info(f"  cut [{region.start:.3f}s, {region.end:.3f}s)")

    summary = session.get_summary()
    logger.info(
        f"{summary['region_count']} regions, {summary['deleted_duration']:.2f}s of "
        f"{summary['duration']:.2f}s marked for removal"
    )

    if args.dry_run:
        return 0

    export_service = ExportService()
    output_path = Path(args.output_file) if args.output_file else export_service.default_output_path(input_path)

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    thread = ExportThread(
        session.buffer,
        session.region_set,
        output_path,
        source_path=input_path,
        export_service=export_service,
    )
    return run_export(app, thread)


if __name__ == "__main__":
    sys.exit(main())
