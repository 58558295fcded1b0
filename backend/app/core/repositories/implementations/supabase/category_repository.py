from __future__ import annotations

from app.core.models.category import Category
from app.core.repositories.category_repository import CategoryRepository
from app.core.repositories.implementations.supabase.base import SupabaseRepository


class SupabaseCategoryRepository(SupabaseRepository[Category], CategoryRepository):
    """Supabase implementation of the CategoryRepository.

    Assumes a `categories` table with columns matching the `Category` model fields.
    """

    TABLE_NAME = "categories"
    MODEL = Category
