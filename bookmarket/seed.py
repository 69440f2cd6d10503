# seed.py
import logging

from bookmarket.constants.book_attributes import BookCategory, BookCondition, BookFormat
from bookmarket.database import EntityStore
from bookmarket.models.book import Book
from bookmarket.models.user import User
from bookmarket.services.user_service import get_user_by_username
from bookmarket.utils.hash import hash_password

logger = logging.getLogger(__name__)

IMAGE_URL = "https://images.unsplash.com/{photo}?auto=format&fit=crop&w=300&h=450&q=80"

ADMIN = {
    "username": "admin",
    "password": "password123",
    "name": "Admin User",
    "email": "admin@example.com",
    "profile_image": "https://api.dicebear.com/6.x/avataaars/svg?seed=admin",
}

BOOKS = [
    {
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "description": "Racism and injustice in the American South, seen through the eyes of Scout Finch.",
        "price": 12.99,
        "condition": BookCondition.like_new,
        "format": BookFormat.paperback,
        "category": BookCategory.fiction,
        "photo": "photo-1544947950-fa07a98d237f",
        "extra_photos": ["photo-1512820790803-83ca734da794", "photo-1543002588-bfa74002ed7e"],
    },
    {
        "title": "1984",
        "author": "George Orwell",
        "description": "A dystopia of totalitarian rule, mass surveillance and enforced conformity.",
        "price": 9.50,
        "condition": BookCondition.very_good,
        "format": BookFormat.paperback,
        "category": BookCategory.fiction,
        "photo": "photo-1589998059171-988d887df646",
    },
    {
        "title": "Pride and Prejudice",
        "author": "Jane Austen",
        "description": "Elizabeth Bennet learns the cost of hasty judgements in Regency England.",
        "price": 8.75,
        "condition": BookCondition.good,
        "format": BookFormat.paperback,
        "category": BookCategory.fiction,
        "photo": "photo-1629992101753-56d196c8aabb",
    },
    {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "description": "Decadence and idealism in the Jazz Age, told through the self-made Jay Gatsby.",
        "price": 10.50,
        "condition": BookCondition.like_new,
        "format": BookFormat.hardcover,
        "category": BookCategory.fiction,
        "photo": "photo-1621351183012-e2f9972dd9bf",
        "extra_photos": ["photo-1589829085413-56de8ae18c73", "photo-1585158531004-3224babed121"],
    },
    {
        "title": "Harry Potter and the Sorcerer's Stone",
        "author": "J.K. Rowling",
        "description": "A young wizard discovers his heritage and starts his first year at Hogwarts.",
        "price": 15.99,
        "condition": BookCondition.very_good,
        "format": BookFormat.hardcover,
        "category": BookCategory.fantasy,
        "photo": "photo-1603162525937-e5e3baef4d54",
        "extra_photos": ["photo-1600189261867-30e5ffe7b8da", "photo-1609866138210-84bb689f0bc8"],
    },
    {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "description": "Bilbo Baggins sets out to win a share of the treasure guarded by Smaug the dragon.",
        "price": 11.25,
        "condition": BookCondition.good,
        "format": BookFormat.paperback,
        "category": BookCategory.fantasy,
        "photo": "photo-1614332287897-cdc485fa562d",
    },
    {
        "title": "Brave New World",
        "author": "Aldous Huxley",
        "description": "Technology and social engineering strip a future society of its humanity.",
        "price": 7.50,
        "condition": BookCondition.acceptable,
        "format": BookFormat.paperback,
        "category": BookCategory.sci_fi,
        "photo": "photo-1612969308146-066015efc293",
    },
    {
        "title": "The Catcher in the Rye",
        "author": "J.D. Salinger",
        "description": "Holden Caulfield wanders New York, wrestling with alienation and lost innocence.",
        "price": 9.25,
        "condition": BookCondition.very_good,
        "format": BookFormat.paperback,
        "category": BookCategory.fiction,
        "photo": "photo-1633477189729-9290b3261d0a",
    },
]


def load_sample_data(store: EntityStore) -> None:
    """Create the admin seller and the sample listings if they are missing."""
    admin = get_user_by_username(store, ADMIN["username"])
    if admin is None:
        admin = store.create(User, {**ADMIN, "password": hash_password(ADMIN["password"])})
        logger.info(f"Created sample user {admin.username}")

    if store.count(Book) == 0:
        for entry in BOOKS:
            data = {k: v for k, v in entry.items() if k not in ("photo", "extra_photos")}
            store.create(Book, {
                **data,
                "image_url": IMAGE_URL.format(photo=entry["photo"]),
                "additional_images": [
                    IMAGE_URL.format(photo=photo) for photo in entry.get("extra_photos", [])
                ],
                "seller_id": admin.id,
            })
        logger.info(f"Loaded {len(BOOKS)} sample books")
