from sqlalchemy import Column, Integer, String, Text
from app.core.database import Base


class JobOffer(Base):
    """
    An open position candidates can be assigned to.
    Seeded outside the API; the application only reads these rows.
    """
    __tablename__ = "JobOffer"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    salary_range = Column(String, nullable=True)  # free text, e.g. "$50k-$70k"
    location = Column(String, nullable=True)

    def __repr__(self):
        return f"<JobOffer(id={self.id}, title='{self.title}')>"
