"""Exception hierarchy for manifest and workspace operations.

Every error carries a stable ``code`` so the service layer can convert it
into a :class:`~vendorctl.services.result.ServiceError` without inspecting
the message text.
"""

from __future__ import annotations


class VendorError(Exception):
    """Base class for all vendorctl domain errors."""

    code = "VENDOR_ERROR"


class DuplicateModuleError(VendorError):
    """A module with the same protocol and path is already in the manifest."""

    code = "DUPLICATE_MODULE"


class MissingModuleError(VendorError):
    """No module in the manifest owns the requested URL."""

    code = "MODULE_NOT_FOUND"


class LinkNotFoundError(VendorError):
    """The file is not linked from its owning module."""

    code = "LINK_NOT_FOUND"


class AliasExistsError(VendorError):
    code = "ALIAS_EXISTS"


class AliasNotFoundError(VendorError):
    code = "ALIAS_NOT_FOUND"


class ExportInspectionError(VendorError):
    """Fetching or reading a source file for export inspection failed."""

    code = "EXPORT_INSPECTION_FAILED"


class InvalidModuleURLError(VendorError):
    code = "INVALID_URL"


class ManifestError(VendorError):
    """The manifest file is missing or cannot be parsed."""

    code = "INVALID_MANIFEST"


class WorkspacePathError(VendorError):
    """A link or alias path resolves outside the workspace root."""

    code = "INVALID_PATH"
