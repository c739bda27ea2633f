"""CLI output: human (Rich), quiet, and JSON renderings of ServiceResult."""
