from dashboard.core.config import settings

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "internal_error": "Internal server error",
        "validation_error": "Invalid request data",
        "not_authenticated": "Not authenticated",
        "insufficient_permissions": "Insufficient permissions",
        "credentials_required": "Email and password are required",
        "invalid_credentials": "Invalid credentials",
        "user_inactive": "Inactive user",
        "login_succeeded": "Login successful",
        "logout_succeeded": "Logout successful",
        "user_not_found": "User not found",
        "email_in_use": "Email is already in use",
        "only_admin_changes_roles": "Only administrators can change roles",
        "only_staff_assigns_projects": "Only administrators and managers can assign projects",
        "only_admin_deletes_users": "Only administrators can delete users",
        "cannot_delete_self": "You cannot delete your own account",
        "user_created": "User created successfully",
        "user_updated": "User updated successfully",
        "user_deleted": "User deleted successfully",
        "project_not_found": "Project not found",
        "project_forbidden": "You do not have access to this project",
        "only_admin_deletes_projects": "Only administrators can delete projects",
        "project_fields_required": "Name, description and client are required",
        "project_name_too_short": "Name must be at least 2 characters long",
        "project_description_too_short": "Description must be at least 10 characters long",
        "project_client_required": "Client is required",
        "project_created": "Project created successfully",
        "project_updated": "Project updated successfully",
        "project_deleted": "Project deleted successfully",
        "user_ids_must_be_list": "userIds must be an array",
        "users_assigned": "Users assigned successfully",
        "comment_not_found": "Comment not found",
        "comment_added": "Comment added successfully",
        "comment_removed": "Comment removed successfully",
    },
    "es": {
        "internal_error": "Error interno del servidor",
        "validation_error": "Datos de la solicitud inválidos",
        "not_authenticated": "No autenticado",
        "insufficient_permissions": "Permisos insuficientes",
        "credentials_required": "Email y contraseña son requeridos",
        "invalid_credentials": "Credenciales inválidas",
        "user_inactive": "Usuario inactivo",
        "login_succeeded": "Login exitoso",
        "logout_succeeded": "Logout exitoso",
        "user_not_found": "Usuario no encontrado",
        "email_in_use": "El email ya está en uso",
        "only_admin_changes_roles": "Solo los administradores pueden cambiar roles",
        "only_staff_assigns_projects": "Solo administradores y managers pueden asignar proyectos",
        "only_admin_deletes_users": "Solo los administradores pueden eliminar usuarios",
        "cannot_delete_self": "No puedes eliminar tu propia cuenta",
        "user_created": "Usuario creado exitosamente",
        "user_updated": "Usuario actualizado exitosamente",
        "user_deleted": "Usuario eliminado exitosamente",
        "project_not_found": "Proyecto no encontrado",
        "project_forbidden": "No tienes acceso a este proyecto",
        "only_admin_deletes_projects": "Solo los administradores pueden eliminar proyectos",
        "project_fields_required": "Nombre, descripción y cliente son requeridos",
        "project_name_too_short": "El nombre debe tener al menos 2 caracteres",
        "project_description_too_short": "La descripción debe tener al menos 10 caracteres",
        "project_client_required": "El cliente es requerido",
        "project_created": "Proyecto creado exitosamente",
        "project_updated": "Proyecto actualizado exitosamente",
        "project_deleted": "Proyecto eliminado exitosamente",
        "user_ids_must_be_list": "userIds debe ser un array",
        "users_assigned": "Usuarios asignados exitosamente",
        "comment_not_found": "Comentario no encontrado",
        "comment_added": "Comentario agregado exitosamente",
        "comment_removed": "Comentario eliminado exitosamente",
    },
}


def resolve_locale(accept_language: str | None) -> str:
    """Pick the first supported language from an Accept-Language header."""
    if accept_language:
        for part in accept_language.split(","):
            tag = part.split(";")[0].strip().lower()
            lang = tag.split("-")[0]
            if lang in MESSAGES:
                return lang
    return settings.DEFAULT_LOCALE if settings.DEFAULT_LOCALE in MESSAGES else "en"


def translate(key: str, locale: str) -> str:
    catalog = MESSAGES.get(locale, MESSAGES["en"])
    return catalog.get(key) or MESSAGES["en"].get(key, key)
