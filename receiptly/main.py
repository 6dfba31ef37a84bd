import argparse
import json
import mimetypes
import sys
from pathlib import Path

from receiptly.config.settings import Settings
from receiptly.database.connection import close_pool, init_pool
from receiptly.logging.logger import Log
from receiptly.processor.exceptions import PersistenceError
from receiptly.processor.processor import build_processor
from receiptly.upload.exceptions import UploadRejectedError
from receiptly.upload.models import UploadedFile


def load_upload(path: Path, content_type: str | None = None) -> UploadedFile:
    """Read a local file into an UploadedFile, guessing its media type."""
    content = path.read_bytes()
    if content_type is None:
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return UploadedFile(
        content=content,
        content_type=content_type,
        size=len(content),
        filename=path.name,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="receiptly",
        description="Ingest a receipt file and save its categorized food items.",
    )
    parser.add_argument("file", type=Path, help="receipt image (JPG, PNG) or PDF")
    parser.add_argument("--caller-id", required=True, help="identity of the uploading user")
    parser.add_argument("--content-type", default=None, help="override the guessed media type")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: initialize pool -> build dependencies -> ingest one file."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        processor = build_processor(settings)
        upload = load_upload(args.file, args.content_type)
        result = processor.ingest(upload, caller_id=args.caller_id)
    except UploadRejectedError as exc:
        print(json.dumps({"success": False, "reason": exc.reason.value, "error": str(exc)}))
        return 2
    except PersistenceError as exc:
        print(json.dumps({"success": False, "error": str(exc)}))
        return 1
    finally:
        close_pool()

    print(json.dumps(result.to_dict()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
