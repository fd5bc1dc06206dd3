"""
Seed service - demo data for an empty database.
Design: Everything goes through the regular services, so seeded rows obey the same
rules as API-created ones (hashed passwords, legal order transitions).
"""

import logging
from decimal import Decimal

from sqlalchemy import func, select

from vinylplatz.db.models.order import OrderStatus
from vinylplatz.db.models.user import User, UserRole
from vinylplatz.db.models.vinyl import VinylCondition
from vinylplatz.schemas.genre import GenreCreate
from vinylplatz.schemas.user import UserCreate
from vinylplatz.schemas.vinyl import VinylCreate
from vinylplatz.services.marketplace import Marketplace

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

USERS = [
    ("Alice Wonderland", "alice@example.com", UserRole.ADMIN, "123 Rabbit Hole, Wonderland"),
    ("Bob The Builder", "bob@example.com", UserRole.USER, "456 Construction Ave, Builderville"),
    ("Charlie Chaplin", "charlie@example.com", UserRole.USER, "789 Silent Film St, Hollywood"),
    ("Diana Prince", "diana@example.com", UserRole.USER, "1 Paradise Island, Themyscira"),
    ("Ethan Hunt", "ethan@example.com", UserRole.USER, "IMF Headquarters, Langley"),
]

GENRES = {
    "Rock": "Genre originating from rock and roll.",
    "Jazz": "Music genre that originated in the African-American communities.",
    "Pop": "Popular music genre.",
    "Electronic": "Music primarily featuring electronic instruments.",
    "Hip Hop": "Music genre developed in the United States by inner-city African Americans.",
    "Blues": "Music genre originated by African Americans in the Deep South.",
    "Classical": "Art music produced or rooted in the traditions of Western culture.",
}

# (seller index, title, artist, year, condition, price, genre, description)
VINYLS = [
    (0, "Led Zeppelin IV", "Led Zeppelin", 1971, VinylCondition.VERY_GOOD_PLUS, "55.00", "Rock",
     "Classic hard rock, includes Stairway to Heaven."),
    (0, "The Wall", "Pink Floyd", 1979, VinylCondition.EXCELLENT, "70.00", "Rock",
     "Iconic concept album. Gatefold sleeve."),
    (0, "Harvest", "Neil Young", 1972, VinylCondition.VERY_GOOD, "48.00", "Rock",
     "Features Heart of Gold."),
    (1, "Kind of Blue", "Miles Davis", 1959, VinylCondition.GOOD, "40.00", "Jazz",
     "Essential modal jazz album."),
    (1, "A Love Supreme", "John Coltrane", 1965, VinylCondition.VERY_GOOD, "60.00", "Jazz",
     "Spiritual jazz masterpiece."),
    (2, "Thriller", "Michael Jackson", 1982, VinylCondition.NEAR_MINT, "50.00", "Pop",
     "Best-selling album worldwide."),
    (2, "Random Access Memories", "Daft Punk", 2013, VinylCondition.MINT, "45.00", "Electronic",
     "Grammy winner, sealed copy."),
    (3, "Ready to Die", "The Notorious B.I.G.", 1994, VinylCondition.VERY_GOOD_PLUS, "75.00", "Hip Hop",
     "East Coast hip hop classic."),
    (3, "Moanin'", "Art Blakey & The Jazz Messengers", 1959, VinylCondition.VERY_GOOD, "50.00", "Jazz",
     "Hard bop standard."),
    (4, "Texas Flood", "Stevie Ray Vaughan", 1983, VinylCondition.EXCELLENT, "65.00", "Blues",
     "Debut album, defining blues rock sound."),
    (4, "The Four Seasons", "Antonio Vivaldi", 1981, VinylCondition.GOOD, "30.00", "Classical",
     "Baroque masterpiece performed by The Academy of Ancient Music."),
]

# (buyer index, vinyl index, status path walked by the seller)
ORDERS = [
    (1, 0, [OrderStatus.PAID, OrderStatus.SHIPPED, OrderStatus.COMPLETED]),
    (2, 3, [OrderStatus.PAID, OrderStatus.SHIPPED]),
    (0, 7, [OrderStatus.PAID]),
    (4, 5, []),
    (3, 9, [OrderStatus.CANCELLED]),
]


class SeedService:
    def __init__(self, marketplace: Marketplace):
        self.mp = marketplace

    async def run(self) -> bool:
        """Seed when no user exists. Returns True if data was written."""
        count = await self.mp.session.scalar(select(func.count()).select_from(User))
        if count:
            logger.info("Database already seeded (%d users); skipping", count)
            return False

        users = []
        for name, email, role, address in USERS:
            users.append(
                await self.mp.users.create_user(
                    UserCreate(name=name, email=email, password=DEMO_PASSWORD, address=address),
                    role=role,
                )
            )

        genres = {}
        for name, description in GENRES.items():
            genres[name] = await self.mp.genres.create_genre(GenreCreate(name=name, description=description))

        vinyls = []
        for seller, title, artist, year, condition, price, genre, description in VINYLS:
            data = VinylCreate(
                title=title,
                artist=artist,
                release_year=year,
                condition=condition,
                price=Decimal(price),
                genre_id=genres[genre].id,
                description=description,
            )
            vinyls.append(await self.mp.vinyls.create_vinyl(users[seller].id, data))

        for buyer, vinyl, path in ORDERS:
            order = await self.mp.orders.create_order(users[buyer].id, vinyls[vinyl].id)
            for status in path:
                await self.mp.orders.update_status(order.id, order.seller_id, status)

        logger.info(
            "Seeded %d users, %d genres, %d vinyls, %d orders",
            len(users), len(genres), len(vinyls), len(ORDERS),
        )
        return True
