import os
import sys
import tempfile
from pathlib import Path

# Keep test runs from writing into the repo's logs/ and from picking up a real catalog
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="media_archive_logs_"))
os.environ.pop("MEDIA_CSV", None)

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
