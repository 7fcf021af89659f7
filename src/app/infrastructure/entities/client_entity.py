from datetime import date
from sqlalchemy import String, Date, Index
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class ClientEntity(Base):
    """SQLAlchemy model for the clientes table."""
    __tablename__ = "clientes"

    id: Mapped[int] = mapped_column("id", primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column("nombre", String(100), nullable=False)
    last_name: Mapped[str] = mapped_column("apellido", String(100), nullable=False)
    corporate_name: Mapped[str] = mapped_column("razon_social", String(200), nullable=False)
    cuit: Mapped[str] = mapped_column("cuit", String(13), unique=True, index=True, nullable=False)
    birthdate: Mapped[date] = mapped_column("fecha_nacimiento", Date, nullable=False)
    cell_phone: Mapped[str] = mapped_column("telefono_celular", String(30), nullable=False)
    email: Mapped[str] = mapped_column("email", String(255), unique=True, index=True, nullable=False)
    # Folded copy of "first last corporate" kept in sync by ClientMapper
    search_name: Mapped[str] = mapped_column("nombre_busqueda", String(420), nullable=False, default="")


# GIN trigram index so that LIKE '%fragment%' on the folded names can use an index.
# Only emitted on PostgreSQL (requires pg_trgm); other dialects get a plain index.
Index(
    'ix_clientes_nombre_busqueda_gin',
    ClientEntity.search_name,
    postgresql_using='gin',
    postgresql_ops={'nombre_busqueda': 'gin_trgm_ops'}
)
