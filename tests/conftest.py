import os
import tempfile

# Keep rotating log files out of the source tree while tests run
os.environ.setdefault("MFE_LOG_DIR", tempfile.mkdtemp(prefix="mood_fusion_logs_"))
