from sqlalchemy import Column, Integer, String, Text, Boolean, UniqueConstraint
from database import Base


class AmalanRecord(Base):
    __tablename__ = "records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_name = Column(String(200), nullable=False)
    day = Column(Integer, nullable=False)  # 1..30 within the observance period

    # "jamaah" / "munfarid" / NULL
    sholat_subuh = Column(String(10), nullable=True)
    sholat_dzuhur = Column(String(10), nullable=True)
    sholat_ashar = Column(String(10), nullable=True)
    sholat_maghrib = Column(String(10), nullable=True)
    sholat_isya = Column(String(10), nullable=True)
    sholat_tarawih = Column(String(10), nullable=True)

    sholat_dhuha = Column(Boolean, default=False)
    infaq = Column(Boolean, default=False)
    dzikir = Column(Boolean, default=False)
    itikaf = Column(Boolean, default=False)

    tausiyah_ustadz = Column(String(200), nullable=True)
    tausiyah_tema = Column(String(200), nullable=True)
    tausiyah_intisari = Column(Text, nullable=True)

    quran_pages = Column(Integer, default=0)
    total_exp = Column(Integer, default=0)  # cached score, recomputed on every write
    updated_at = Column(String(40), nullable=True)  # ISO-8601

    __table_args__ = (
        UniqueConstraint("student_name", "day", name="uq_record_student_day"),
    )

    def to_dict(self) -> dict:
        return {c.name: getattr(self, c.name) for c in self.__table__.columns if c.name != "id"}
