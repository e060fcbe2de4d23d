import os


os.environ.setdefault("PARAMS_SANITIZER_LOG_LEVEL", "WARNING")
os.environ.setdefault("PARAMS_SANITIZER_ENABLE_DEBUG_LOG", "false")
