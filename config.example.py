# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKTRACK_APP_NAME": "App display name (default: tasktrack).",
    "TASKTRACK_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKTRACK_LOG_DIR": "Directory for the debug log file (default: .local/tasktrack).",
    "TASKTRACK_LOG_TO_FILE": "Also write <log_dir>/tasktrack.log (true/false, default: false).",
    # Background status reporter
    "TASKTRACK_STATUS_ENABLED": "Run the periodic status reporter (true/false, default: true).",
    "TASKTRACK_STATUS_INTERVAL": "Seconds between status lines (default: 10).",
    "TASKTRACK_STATUS_MESSAGE": "Status text (default: Checking system status...).",
}
