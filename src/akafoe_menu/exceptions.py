"""Custom exceptions for akafoe_menu."""


class AkafoeMenuError(Exception):
    """Base exception for akafoe_menu operations."""


class TokenizeError(AkafoeMenuError):
    """Feed document contains unterminated markup."""


class TreeBuildError(AkafoeMenuError):
    """Error while rebuilding the document tree from events."""


class DecodeError(TreeBuildError):
    """Tag name or text bytes could not be decoded."""


class UnescapeError(TreeBuildError):
    """Character references in text could not be resolved."""


class BareAmpersandError(UnescapeError):
    """Text contains an `&` that does not start a valid reference."""


class MismatchedTagError(TreeBuildError):
    """End tag does not close the most recently opened element."""


class BuilderStateError(TreeBuildError):
    """Event fed to a builder that already produced its root."""


class IncompleteDocumentError(TreeBuildError):
    """Event stream ended before the root element was closed."""


class AssemblyError(AkafoeMenuError):
    """Error while grouping entry content into sections."""


class OrphanListError(AssemblyError):
    """Meal list appears before any section heading."""


class FetchError(AkafoeMenuError):
    """Error during feed fetching."""


class FeedNotAvailableError(FetchError):
    """Feed URL returned 404."""


class UnknownFeedError(AkafoeMenuError):
    """Feed key is not in the catalogue."""
