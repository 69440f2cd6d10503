from bookmarket.models.user import User, UserPublic
from bookmarket.models.book import Book
from bookmarket.models.cart import CartItem
from bookmarket.models.order import Order
from bookmarket.models.order_item import OrderItem

# every kind the entity store keeps a table for
ENTITY_KINDS = (User, Book, CartItem, Order, OrderItem)
