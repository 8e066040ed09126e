"""
Masking of secret answers.

Values typed into ``password`` prompts are registered here and replaced by
'***' in log records and in mapping dumps. Masking is best-effort.
"""

import logging
import re
from typing import Any, Dict, Set


class SecretsMasker:
    """Tracks secret values and masks them in text and mappings."""

    def __init__(self):
        self._masked_values: Set[str] = set()

    def add(self, value: str) -> None:
        """Register a value to mask. Empty strings are ignored."""
        if value:
            self._masked_values.add(value)

    def mask_text(self, text: str) -> str:
        """
        Mask known secret values in text.

        Args:
            text: Text potentially containing secrets

        Returns:
            Text with secrets masked
        """
        if not text or not self._masked_values:
            return text

        masked = text
        # Longer values first so a secret containing another is fully masked
        for secret_value in sorted(self._masked_values, key=len, reverse=True):
            if secret_value in masked:
                masked = re.sub(re.escape(secret_value), '***', masked)

        return masked

    def mask_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Recursively mask secrets in a dictionary.

        Args:
            data: Dictionary potentially containing secrets

        Returns:
            Dictionary with secrets masked
        """
        if not data or not self._masked_values:
            return data

        masked = {}
        for key, value in data.items():
            if isinstance(value, str):
                masked[key] = self.mask_text(value)
            elif isinstance(value, dict):
                masked[key] = self.mask_dict(value)
            elif isinstance(value, list):
                masked[key] = [
                    self.mask_text(item) if isinstance(item, str) else item
                    for item in value
                ]
            else:
                masked[key] = value

        return masked

    def clear(self) -> None:
        self._masked_values.clear()


class SecretsMaskingFilter(logging.Filter):
    """
    Logging filter for masking secrets in log records.

    Attach to handlers so that secrets are masked before formatting.
    """

    def __init__(self, masker: SecretsMasker):
        super().__init__()
        self.masker = masker

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self.masker.mask_text(str(record.msg))

        if record.args:
            if isinstance(record.args, dict):
                record.args = self.masker.mask_dict(record.args)
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self.masker.mask_text(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        return True
