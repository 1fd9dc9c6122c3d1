from pagecraft.extensions import db
from .base import BaseModel


class Page(BaseModel):
    __tablename__ = "pages"

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    business_context = db.Column(db.JSON(none_as_null=True), nullable=True)
    theme = db.Column(db.JSON, nullable=False, default=dict)

    # Ordered sections, deleted with the page
    sections = db.relationship(
        "Section",
        back_populates="page",
        order_by="Section.order",
        cascade="all, delete-orphan"
    )
