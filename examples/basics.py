from tinystore import Store

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Creating a store")
print("-" * 100)
print()

# A store holds one value. Subscribers are called right away with the current value.
current_name = Store("Alice", key="name")

log_on_change = lambda name: print(f"Name is now: {name}")

unsubscribe = current_name.subscribe(log_on_change)  # Name is now: Alice
current_name.set("Smith")  # Name is now: Smith
current_name.set("Smith")  # Unchanged, nothing printed

unsubscribe()
current_name.set("Bob")  # No longer printed

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Updating from the current value")
print("-" * 100)
print()

counter = Store(0, key="counter")
counter.subscribe(lambda count: print(f"Count: {count}"))

counter.update(lambda count: count + 1)
counter.update(lambda count: count * 10)
counter.reset()  # Back to 0

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Scoped subscriptions")
print("-" * 100)
print()

cart = Store((), key="cart")

with cart.subscribe(lambda items: print(f"Cart has {len(items)} item(s)")):
    cart.update(lambda items: items + ("apple",))
    cart.update(lambda items: items + ("pear",))

# Outside the block the subscriber is gone
cart.update(lambda items: items + ("plum",))
print(f"Final cart: {cart.get()}")
