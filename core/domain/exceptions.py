"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions. The API layer maps each
family to an HTTP status; the message is what the dashboard shows.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class NotFoundError(DomainException):
    """Base exception for missing records."""

    pass


class ConflictError(DomainException):
    """Base exception for uniqueness violations and blocked deletes."""

    pass


class InvalidReferenceError(DomainException):
    """Base exception for references to records that do not exist."""

    pass


class InvalidInputError(DomainException):
    """Raised when input is well-formed but unusable (e.g. a name with no slug characters)."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, code="INVALID_INPUT")


class PersistenceError(DomainException):
    """Raised when the database rejects an otherwise valid operation."""

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, code="PERSISTENCE_ERROR")


# Brands


class BrandNotFoundError(NotFoundError):
    """Raised when a brand is not found."""

    def __init__(self, message: str = "Brand not found"):
        super().__init__(message, code="BRAND_NOT_FOUND")


class BrandAlreadyExistsError(ConflictError):
    """Raised when a brand with the same slug exists."""

    def __init__(self, message: str = "Brand with this name already exists"):
        super().__init__(message, code="BRAND_ALREADY_EXISTS")


class BrandInUseError(ConflictError):
    """Raised when deleting a brand that still has products."""

    def __init__(self, message: str = "Cannot delete brand with products"):
        super().__init__(message, code="BRAND_IN_USE")


class BrandReferenceError(InvalidReferenceError):
    """Raised when a product points at a brand that does not exist."""

    def __init__(self, message: str = "Selected brand does not exist"):
        super().__init__(message, code="INVALID_BRAND")


# Categories


class CategoryNotFoundError(NotFoundError):
    """Raised when a category is not found."""

    def __init__(self, message: str = "Category not found"):
        super().__init__(message, code="CATEGORY_NOT_FOUND")


class CategoryAlreadyExistsError(ConflictError):
    """Raised when a category with the same slug exists."""

    def __init__(self, message: str = "Category with this name already exists"):
        super().__init__(message, code="CATEGORY_ALREADY_EXISTS")


class CategoryInUseError(ConflictError):
    """Raised when deleting a category that still has products."""

    def __init__(self, message: str = "Cannot delete category with products"):
        super().__init__(message, code="CATEGORY_IN_USE")


class ParentCategoryNotFoundError(InvalidReferenceError):
    """Raised when the selected parent category does not exist."""

    def __init__(self, message: str = "Selected parent category does not exist"):
        super().__init__(message, code="INVALID_PARENT_CATEGORY")


class CategoryHierarchyError(InvalidReferenceError):
    """Raised when a category would become its own ancestor."""

    def __init__(self, message: str = "A category cannot be its own parent"):
        super().__init__(message, code="INVALID_CATEGORY_HIERARCHY")


class CategoryReferenceError(InvalidReferenceError):
    """Raised when a product points at a category that does not exist."""

    def __init__(self, message: str = "Selected category does not exist"):
        super().__init__(message, code="INVALID_CATEGORY")


# Products


class ProductNotFoundError(NotFoundError):
    """Raised when a product is not found."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND")


class ProductAlreadyExistsError(ConflictError):
    """Raised when a product with the same slug exists."""

    def __init__(self, message: str = "Product with this name already exists"):
        super().__init__(message, code="PRODUCT_ALREADY_EXISTS")


class ProductHasOrdersError(ConflictError):
    """Raised when deleting a product referenced by orders."""

    def __init__(self, message: str = "Cannot delete product with existing orders"):
        super().__init__(message, code="PRODUCT_HAS_ORDERS")


# Accounts


class UserAlreadyExistsError(DomainException):
    """Raised when registering an email that is already taken."""

    def __init__(self, message: str = "User already exists"):
        super().__init__(message, code="USER_ALREADY_EXISTS")


class InvalidPasswordError(DomainException):
    """Raised when a password fails the configured validators."""

    def __init__(self, message: str = "Password is too weak"):
        super().__init__(message, code="INVALID_PASSWORD")


class InvalidCredentialsError(DomainException):
    """Raised when login credentials do not match a user."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class AuthenticationRequiredError(DomainException):
    """Raised when an anonymous request reaches a protected resource."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="AUTHENTICATION_REQUIRED")


class AdminAccessRequiredError(DomainException):
    """Raised when a non-admin user reaches the dashboard."""

    def __init__(self, message: str = "Admin access required"):
        super().__init__(message, code="ADMIN_ACCESS_REQUIRED")


# Uploads


class FileValidationError(DomainException):
    """Base exception for rejected upload requests."""

    pass


class NoFileProvidedError(FileValidationError):
    """Raised when an upload request carries no file."""

    def __init__(self, message: str = "No file provided"):
        super().__init__(message, code="NO_FILE_PROVIDED")


class InvalidFileTypeError(FileValidationError):
    """Raised when the uploaded file is not an image."""

    def __init__(self, message: str = "Only image files are allowed"):
        super().__init__(message, code="INVALID_FILE_TYPE")


class FileTooLargeError(FileValidationError):
    """Raised when the uploaded file exceeds the size limit."""

    def __init__(self, message: str = "File size exceeds 1MB limit"):
        super().__init__(message, code="FILE_TOO_LARGE")


class MissingFileUrlError(FileValidationError):
    """Raised when a delete request has no file URL."""

    def __init__(self, message: str = "No file URL provided"):
        super().__init__(message, code="NO_FILE_URL")


class MissingFileKeyError(FileValidationError):
    """Raised when an UploadThing delete request has no file key."""

    def __init__(self, message: str = "File key is required"):
        super().__init__(message, code="NO_FILE_KEY")


class InvalidFileUrlError(FileValidationError):
    """Raised when a file URL does not match any storage provider layout."""

    def __init__(self, message: str = "Invalid file URL format"):
        super().__init__(message, code="INVALID_FILE_URL")


class StorageError(DomainException):
    """Raised when a storage provider call fails."""

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message, code="STORAGE_ERROR")
