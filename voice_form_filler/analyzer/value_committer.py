"""
Value Committer - Write a normalized value into a field.
"""

from typing import List, Optional

from ..browser.host import FormHost
from ..models.dialogue import CommitResult, CommitStatus
from ..models.field import Field, FieldOption
from ..utils.logger import logger


class ValueCommitter:
    """Applies values to fields and signals the change to the host."""

    @staticmethod
    async def commit(field: Field, value: str, host: FormHost) -> CommitResult:
        """
        Commit a value to a field.

        Enumeration fields are matched against their options; every other
        kind takes the value as-is.

        Args:
            field: Target field
            value: Normalized value
            host: Host owning the field

        Returns:
            CommitResult; NO_MATCHING_OPTION carries the option list

        Raises:
            HostMutationFailure: the host could not set the value
        """
        if field.is_enumeration():
            options = field.options or []
            option = ValueCommitter.match_option(options, value)
            if option is None:
                logger.debug(f"No option matches {value!r} for {field!r}")
                return CommitResult(
                    status=CommitStatus.NO_MATCHING_OPTION,
                    value=value,
                    options=list(options),
                )

            await host.set_value(field, option.value)
            await host.dispatch_change(field)
            return CommitResult(
                status=CommitStatus.COMMITTED,
                value=option.value,
                matched_option=option,
            )

        await host.set_value(field, value)
        await host.dispatch_change(field)
        return CommitResult(status=CommitStatus.COMMITTED, value=value)

    @staticmethod
    def match_option(options: List[FieldOption], value: str) -> Optional[FieldOption]:
        """
        Find the option a spoken value refers to.

        Exact (case-insensitive, trimmed) match on text or value first, then
        containment in either direction against the option text.
        """
        spoken = value.strip().lower()
        if not spoken:
            return None

        for option in options:
            if option.text.strip().lower() == spoken or option.value.strip().lower() == spoken:
                return option

        for option in options:
            text = option.text.strip().lower()
            if text and (spoken in text or text in spoken):
                return option

        return None
