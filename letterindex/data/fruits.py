"""Built-in fruit catalogue."""

FRUITS: tuple[str, ...] = (
    "Apple",
    "Orange",
    "Pineapple",
    "Kiwi",
    "Tomato",
    "Banana",
    "Mango",
    "Kumquat",
    "Strawberry",
    "Blackberry",
    "Blueberry",
    "Raspberry",
    "Pear",
    "Peach",
    "Cherry",
    "Watermelon",
    "Apricot",
    "Fig",
    "Currant",
    "Lemon",
    "Lime",
    "Coconut",
)
