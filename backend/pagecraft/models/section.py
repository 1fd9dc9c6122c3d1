from pagecraft.extensions import db
from .base import BaseModel


class Section(BaseModel):
    __tablename__ = "sections"

    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), nullable=False, index=True)
    type = db.Column(db.String(50), nullable=False)  # hero, features, pricing
    template_id = db.Column(db.String(100), nullable=False)
    order = db.Column(db.Integer, nullable=False, default=1)
    is_visible = db.Column(db.Boolean, nullable=False, default=True)

    content = db.Column(db.JSON, nullable=False, default=dict)
    style_overrides = db.Column(db.JSON(none_as_null=True), nullable=True)
    variants = db.Column(db.JSON(none_as_null=True), nullable=True)
    selected_variant = db.Column(db.Integer, nullable=True)

    page = db.relationship("Page", back_populates="sections")
