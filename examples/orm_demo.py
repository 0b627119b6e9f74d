#!/usr/bin/env python3
"""Walk through every statement type against the configured database.

The database is selected with the ORM_DB_* environment variables (or a .env
file). Without them a SQLite file named demo.sqlite is used.
"""

import asyncio
from pathlib import Path

from orm import (
    Bind,
    DatabaseClient,
    ForeignKey,
    Index,
    Limit,
    Model,
    ModelField,
    Query,
    Reference,
    Where,
    get_logger,
    init_client,
    load_settings,
    setup_logging,
    setup_production_logging,
)

logger = get_logger(__name__)


def build_models() -> tuple[Model, Model]:
    """Create the two demo tables."""
    author = Model(
        table_name="author",
        primary_key=ModelField(
            name="id", type="INTEGER", unsigned=True, auto_increment=True
        ),
        fields=[ModelField(name="name", type="VARCHAR", length=255)],
    )
    book = Model(
        table_name="book",
        primary_key=ModelField(
            name="id", type="INTEGER", unsigned=True, auto_increment=True
        ),
        fields=[
            ModelField(name="author_id", type="INTEGER", unsigned=True, nullable=True),
            ModelField(name="title", type="VARCHAR", length=255, default="untitled"),
            ModelField(name="pages", type="INTEGER", default=0),
        ],
    )
    return author, book


async def run_demo(client: DatabaseClient) -> None:
    author, book = build_models()

    await client.execute(Query().create(author).if_not_exists())
    await client.execute(Query().create(book).if_not_exists())
    logger.info("Tables created")

    author.set_field("name", "Ursula")
    result = await client.execute(Query().insert(author))
    author_id = result.last_insert_id
    logger.info(f"Inserted author {author_id}")

    for title, pages in [("Earthsea", 205), ("The Dispossessed", 341)]:
        book.set_field("author_id", author_id)
        book.set_field("title", title)
        book.set_field("pages", pages)
        await client.execute(Query().insert(book))

    query = (
        Query()
        .select(["book.title", "book.pages"])
        .from_(book)
        .where(Where("book.author_id", "=", Bind(value=author_id)))
        .order_by("book.pages", "DESC")
        .limit(Limit(0, 10))
    )
    logger.info(client.to_sql(query))
    for item in (await client.execute(query)).items:
        logger.info(f"{item.get_field('title').value}: {item.get_field('pages').value}")

    book.set_field("pages", 210)
    await client.execute(
        Query().update(book).where(Where("title", "=", Bind(value="Earthsea")))
    )

    await client.execute(Query().begin_transaction())
    await client.execute(Query().delete().from_(book))
    await client.execute(Query().rollback_transaction())
    logger.info("Rolled back the delete")

    isbn = ModelField(name="isbn", type="VARCHAR", length=20, nullable=True)
    await client.execute(
        Query()
        .alter(book)
        .add_column(isbn)
        .add_index(Index(name="idx_book_isbn", key="isbn", unique=True))
    )
    book.add_field(isbn)

    await client.execute(
        Query()
        .alter(book)
        .drop_column(ModelField(name="pages"))
        .add_foreign_key(
            ForeignKey(
                name="fk_book_author",
                target=Reference("author", "id"),
                with_=Reference("book", "author_id"),
                on_delete="CASCADE",
            )
        )
    )
    logger.info("Book table altered")

    await client.execute(
        Query().delete().from_(book).where(Where("title", "=", Bind(value="Earthsea")))
    )

    await client.execute(Query().rename("book", "old_book"))
    await client.execute(Query().drop(Model(table_name="old_book")))
    await client.execute(Query().drop(author))
    logger.info("Tables renamed and dropped")


async def main() -> None:
    settings = load_settings()
    if settings.is_production:
        setup_production_logging(level=settings.log_level)
    else:
        setup_logging(level=settings.log_level)

    config = settings.database
    if config.get_type() == "sqlite" and not config.host:
        config.host = "demo.sqlite"
        Path(config.host).touch()

    client = await init_client(config)
    try:
        await run_demo(client)
    finally:
        await client.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
