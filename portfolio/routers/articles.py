from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from portfolio.core.database import get_db
from portfolio.core.security import get_current_user
from portfolio.models.article import Article
from portfolio.schemas.article import ArticleCreate, ArticleUpdate, ArticleResponse
from portfolio.services.crud_service import (
    list_records, get_record_or_404, create_record, update_record, delete_record
)

router = APIRouter(prefix="/api", tags=["articles"])


@router.get("/articles", response_model=List[ArticleResponse])
def list_articles(db: Session = Depends(get_db)):
    return list_records(db, Article)


@router.get("/articles/{article_id}", response_model=ArticleResponse)
def get_article(article_id: int, db: Session = Depends(get_db)):
    return get_record_or_404(db, Article, article_id)


@router.post("/admin/articles", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_article(article_data: ArticleCreate, db: Session = Depends(get_db)):
    return create_record(db, Article, article_data.model_dump())


@router.patch("/admin/articles/{article_id}", response_model=ArticleResponse,
              dependencies=[Depends(get_current_user)])
def update_article(article_id: int, article_data: ArticleUpdate, db: Session = Depends(get_db)):
    return update_record(db, Article, article_id, article_data.changes())


@router.delete("/admin/articles/{article_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_article(article_id: int, db: Session = Depends(get_db)):
    delete_record(db, Article, article_id)
