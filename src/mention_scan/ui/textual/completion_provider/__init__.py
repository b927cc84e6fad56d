"""Completion providers for :class:`~mention_scan.ui.textual.mention_input.MentionInput`."""
