"""Slack Web API client: DND, files, groups, direct messages, emoji, and message models."""

__version__ = "0.1.0"