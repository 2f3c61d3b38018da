"""Infrastructure Layer: store gateway and cross-cutting concerns.

Invariants:
    - All engine errors mapped to typed ZeTodoError subclasses before leaving this layer

Design Decisions:
    - Gateway owns the only store handle; stores receive it by injection
"""
