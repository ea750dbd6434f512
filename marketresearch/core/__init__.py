"""core models and research orchestration."""
