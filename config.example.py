# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TIDY_APP_NAME": "Title shown above the task list (default: tidy).",
    "TIDY_LOG_LEVEL": "Console logging level (default: INFO).",
    "TIDY_LOG_FILE": "Write a full DEBUG log to <data_dir>/tidy.log (true/false, default: true).",
    # Console
    "TIDY_COLOR": "ANSI colors on a TTY (true/false, default: true). NO_COLOR always disables.",
    # Task rules
    "TIDY_MAX_TASK_LENGTH": "Maximum task description length (default: 250).",
    "TIDY_FEEDBACK_SECONDS": "Seconds before a status message clears itself (default: 2.0).",
    # Paths (gitignored)
    "TIDY_DATA_DIR": "Local data directory for logs (default: .local/tidy).",
}
