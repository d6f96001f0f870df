"""Portal-Commons - authorization and content-lifecycle core for the agency portal.

This library decides which actions an actor may take, which status changes a
content item may undergo, and what guarded views should render or redirect to.
Logging is not configured on import; call ``setup_logging()`` at startup.
"""

from .__version__ import __version__

from .config import (
    PortalSettings,
    get_settings,
    SessionBackend,
    RoutePaths,
    LoggingConfig,
    setup_logging,
)

from .core.exceptions import (
    # Base Exception
    PortalCommonsError,
    
    # Domain Exceptions
    ConfigurationError,
    LifecycleError,
    InvalidTransitionError,
    UnknownActionError,
    InvalidStatusError,
    SessionError,
    SessionCorruptError,
    SessionStoreError,
    
    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .features.permissions import (
    Role,
    Permission,
    PERMISSION_MATRIX,
    get_role_display_name,
    has_permission,
    can_edit_content,
    can_delete_content,
    can_approve_content,
    can_reject_content,
    can_view_all_clients,
    can_manage_users,
    Capabilities,
    derive_capabilities,
)

from .features.content import (
    ContentKind,
    ContentItem,
    can_transition,
    apply_transition,
    create_content_item,
    ContentWorkflow,
)

from .features.auth import (
    Actor,
    SessionStore,
    SessionProvider,
    create_session_store,
)

from .features.guards import (
    GuardDecision,
    GuardOutcome,
    PermissionGuard,
    RoleGuard,
    RouteGuard,
)

__all__ = [
    "__version__",
    
    # Configuration
    "PortalSettings",
    "get_settings",
    "SessionBackend",
    "RoutePaths",
    "LoggingConfig",
    "setup_logging",
    
    # Exceptions
    "PortalCommonsError",
    "ConfigurationError",
    "LifecycleError",
    "InvalidTransitionError",
    "UnknownActionError",
    "InvalidStatusError",
    "SessionError",
    "SessionCorruptError",
    "SessionStoreError",
    "get_http_status_code",
    "create_error_response",
    
    # Permissions
    "Role",
    "Permission",
    "PERMISSION_MATRIX",
    "get_role_display_name",
    "has_permission",
    "can_edit_content",
    "can_delete_content",
    "can_approve_content",
    "can_reject_content",
    "can_view_all_clients",
    "can_manage_users",
    "Capabilities",
    "derive_capabilities",
    
    # Content lifecycle
    "ContentKind",
    "ContentItem",
    "can_transition",
    "apply_transition",
    "create_content_item",
    "ContentWorkflow",
    
    # Session
    "Actor",
    "SessionStore",
    "SessionProvider",
    "create_session_store",
    
    # Guards
    "GuardDecision",
    "GuardOutcome",
    "PermissionGuard",
    "RoleGuard",
    "RouteGuard",
]
