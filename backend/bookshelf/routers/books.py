"""
Books router for catalogue lookups.
"""
from fastapi import APIRouter, Depends, status

from bookshelf.dependencies.services import get_book_service
from bookshelf.schemas.book import BookResponse
from bookshelf.schemas.common import MessageResponse
from bookshelf.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["Books"])


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List books",
)
async def list_books(
    book_service: BookService = Depends(get_book_service),
):
    """List every book in the catalogue."""
    return await book_service.find_all()


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
    summary="Get book",
)
async def get_book(
    book_id: str,
    book_service: BookService = Depends(get_book_service),
):
    return await book_service.get_by_id(book_id)


@router.delete(
    "/{book_id}",
    response_model=BookResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
    summary="Delete book",
)
async def delete_book(
    book_id: str,
    book_service: BookService = Depends(get_book_service),
):
    """Delete a book and return the deleted document."""
    return await book_service.delete_by_id(book_id)
