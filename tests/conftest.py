import os


os.environ.setdefault("FORMBIND_ENABLE_DEBUG_LOG", "false")
