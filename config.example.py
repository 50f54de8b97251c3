# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Tasks themselves are never written to disk; the data dir only holds the log file.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKDESK_APP_NAME": "Name shown in the menu header (default: taskdesk).",
    "TASKDESK_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKDESK_FILE_LOGGING": "Also write <data_dir>/taskdesk.log (true/false, default: true).",
    "TASKDESK_DATA_DIR": "Local data directory for logs (default: .local/taskdesk).",
    # Tasks
    "TASKDESK_ACTIVE_CAPACITY": "Max number of active tasks (default: 100).",
    "TASKDESK_DATE_FORMAT": "strptime/strftime format for due dates (default: %Y-%m-%d).",
}
