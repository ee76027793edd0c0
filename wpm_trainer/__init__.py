"""Typing-speed trainer: a timed word-stream test reporting WPM and accuracy."""
