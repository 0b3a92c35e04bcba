"""Item slots, weapon kinds and hit-effect kinds with their display names."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Socket",
    "WeaponSocket",
    "WeaponType",
    "HitEffectType",
    "friendly_socket_name",
    "friendly_weapon_socket_name",
]


class _NamedEnum(Enum):
    """Enum whose string form is its value."""

    def __str__(self) -> str:
        return self.value


class Socket(_NamedEnum):
    """Equipment slot of an item."""

    NONE = "none"
    HEAD = "head"
    NECK = "neck"
    SHOULDER = "shoulder"
    BACK = "back"
    CHEST = "chest"
    WRIST = "wrist"
    HANDS = "hands"
    BELT = "belt"
    LEGS = "legs"
    BOOTS = "boots"
    RING = "ring"
    TRINKET = "trinket"
    MAIN_HAND = "main_hand"
    OFF_HAND = "off_hand"
    RANGED = "ranged"


class WeaponSocket(_NamedEnum):
    """Hand a weapon can be wielded in."""

    MAIN_HAND = "main_hand"
    ONE_HAND = "one_hand"
    OFF_HAND = "off_hand"
    TWO_HAND = "two_hand"


class WeaponType(_NamedEnum):
    """Kind of weapon."""

    SWORD = "sword"
    AXE = "axe"
    DAGGER = "dagger"
    MACE = "mace"
    UNARMED = "unarmed"


class HitEffectType(_NamedEnum):
    """What a proc on hit does."""

    NONE = "none"
    EXTRA_HIT = "extra_hit"
    WINDFURY_HIT = "windfury_hit"
    SWORD_SPEC = "sword_spec"
    STAT_BOOST = "stat_boost"
    DAMAGE_PHYSICAL = "damage_physical"
    DAMAGE_MAGIC = "damage_magic"
    REDUCE_ARMOR = "reduce_armor"
    RAGE_BOOST = "rage_boost"


_FRIENDLY_SOCKET_NAMES = {
    Socket.NONE: "None",
    Socket.HEAD: "Helmet",
    Socket.NECK: "Neck",
    Socket.SHOULDER: "Shoulder",
    Socket.BACK: "Back",
    Socket.CHEST: "Chest",
    Socket.WRIST: "Wrist",
    Socket.HANDS: "Hands",
    Socket.BELT: "Belt",
    Socket.LEGS: "Legs",
    Socket.BOOTS: "Boots",
    Socket.RING: "Ring",
    Socket.TRINKET: "Trinket",
    Socket.MAIN_HAND: "Main hand",
    Socket.OFF_HAND: "Off hand",
    Socket.RANGED: "Ranged",
}

_FRIENDLY_WEAPON_SOCKET_NAMES = {
    WeaponSocket.MAIN_HAND: "main-hand",
    WeaponSocket.ONE_HAND: "one-hand",
    WeaponSocket.OFF_HAND: "off-hand",
    WeaponSocket.TWO_HAND: "two-hand",
}


def friendly_socket_name(socket: Socket) -> str:
    """Human readable name of an equipment slot."""
    return _FRIENDLY_SOCKET_NAMES[Socket(socket)]


def friendly_weapon_socket_name(weapon_socket: WeaponSocket) -> str:
    """Human readable name of a weapon hand."""
    return _FRIENDLY_WEAPON_SOCKET_NAMES[WeaponSocket(weapon_socket)]