"""
Error and confirmation message catalogs.

The HTTP status and error class are the stable contract; the text is
looked up here by key so a deployment can switch ``MESSAGES_LOCALE``.
The English catalog keeps the literal strings existing clients match on.
"""

from app.core.config import settings

CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "user_not_found": "User not found",
        "user_blocked": "User is blocked",
        "user_service_unavailable": "User service unavailable",
        "training_plan_not_found": "Training plan not found",
        "training_plan_missing_fields": (
            "Missing required fields (title, type, description, difficulty, trainerId, days, start or end)"),
        "difficulty_out_of_range": "Difficulty must be between 1 and 5",
        "invalid_days": "Days must be weekday names separated by commas",
        "invalid_hour": "Hours must be in format HH:MM",
        "start_hour_after_end_hour": "Start hour must be before end hour",
        "hours_filter_missing_fields": "Missing required fields (start or end hour)",
        "days_filter_missing_fields": "Missing required fields (days)",
        "favorite_not_found": "Favorite not found",
        "review_missing_fields": "Missing required fields (user_id, training_plan_id or score))",
        "score_out_of_range": "Score must be between 1 and 5",
        "self_review": "Trainer can't review his own training plan",
        "duplicate_review": "User already reviewed this training plan",
        "user_training_missing_fields": "Missing required fields (distance, duration, steps, calories or date)",
        "user_training_not_positive": "Distance, duration, steps and calories must be positive",
        "invalid_duration": "Duration must be in format HH:MM:SS",
        "date_in_future": "Date can't be in the future",
        "interval_missing_fields": "Missing required fields (start or end date)",
        "start_after_end": "Start date must be before end date",
        "invalid_group_by": "Invalid group by value",
        "goal_missing_fields": "Missing required fields (title, description, type or metric)",
        "metric_not_positive": "Metric must be positive",
        "invalid_goal_type": "Invalid goal type. Valid types are: {types}",
        "goal_not_found": "Goal not found",
        "goal_deleted": "Goal deleted successfully",
        "invalid_request": "Invalid request: {detail}",
        "value_out_of_range": "Value out of range for the stored field",
        "internal_error": "Internal server error",
    },
    "es": {
        "user_not_found": "Usuario no encontrado",
        "user_blocked": "El usuario está bloqueado",
        "user_service_unavailable": "Servicio de usuarios no disponible",
        "training_plan_not_found": "Plan de entrenamiento no encontrado",
        "training_plan_missing_fields": (
            "Faltan campos obligatorios (title, type, description, difficulty, trainerId, days, start o end)"),
        "difficulty_out_of_range": "La dificultad debe estar entre 1 y 5",
        "invalid_days": "Los días deben ser nombres de días de la semana separados por comas",
        "invalid_hour": "Las horas deben tener el formato HH:MM",
        "start_hour_after_end_hour": "La hora de inicio debe ser anterior a la hora de fin",
        "hours_filter_missing_fields": "Faltan campos obligatorios (hora de inicio o de fin)",
        "days_filter_missing_fields": "Faltan campos obligatorios (días)",
        "favorite_not_found": "Favorito no encontrado",
        "review_missing_fields": "Faltan campos obligatorios (usuario, plan de entrenamiento o puntaje)",
        "score_out_of_range": "El puntaje debe estar entre 1 y 5",
        "self_review": "El entrenador no puede calificar su propio plan de entrenamiento",
        "duplicate_review": "El usuario ya calificó este plan de entrenamiento",
        "user_training_missing_fields": "Faltan campos obligatorios (distancia, duración, pasos, calorías o fecha)",
        "user_training_not_positive": "La distancia, duración, pasos y calorías deben ser positivos",
        "invalid_duration": "La duración debe tener el formato HH:MM:SS",
        "date_in_future": "La fecha no puede estar en el futuro",
        "interval_missing_fields": "Faltan campos obligatorios (fecha de inicio o de fin)",
        "start_after_end": "La fecha de inicio debe ser anterior a la fecha de fin",
        "invalid_group_by": "Valor de agrupación inválido",
        "goal_missing_fields": "Faltan campos obligatorios (título, descripción, tipo o métrica)",
        "metric_not_positive": "La métrica debe ser positiva",
        "invalid_goal_type": "Tipo de meta inválido. Los tipos válidos son: {types}",
        "goal_not_found": "Meta no encontrada",
        "goal_deleted": "Meta eliminada correctamente",
        "invalid_request": "Solicitud inválida: {detail}",
        "value_out_of_range": "Valor fuera de rango para el campo almacenado",
        "internal_error": "Error interno del servidor",
    },
}


def text(key: str, **params) -> str:
    """Return the message for ``key`` in the configured locale."""
    catalog = CATALOGS.get(settings.MESSAGES_LOCALE, CATALOGS["en"])
    template = catalog.get(key) or CATALOGS["en"][key]
    return template.format(**params) if params else template
