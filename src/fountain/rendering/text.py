"""Player-facing text, keyed by room kind."""
from fountain.components.room import RoomKind

SEPARATOR = "-" * 82

INTRO_LINES = (
    "Welcome to the Fountain of Objects!",
    "Unnatural darkness pervades the caverns, preventing both natural and human-made light. "
    "You must navigate the caverns in the dark.",
    "To escape you must find and enable the Fountain of Objects. "
    "But beware, dangers may lurk in every room.",
)

HELP_LINES = (
    "Commands:",
    "  move north|east|south|west   walk into the neighbouring room",
    "  shoot north|east|south|west  fire an arrow into the neighbouring room",
    "  enable fountain              reactivate the Fountain of Objects when you are in its room",
    "  help                         show this list",
    "North and east lead away from the entrance; south and west lead back towards it.",
    "Pits and amaroks are deadly. Maelstroms will carry you off. Arrows kill maelstroms and amaroks.",
    "Return to the entrance with the fountain enabled to win.",
)

ROOM_DESCRIPTIONS = {
    RoomKind.EMPTY: "You do not sense anything. The room appears to be empty.",
    RoomKind.ENTRANCE: "You see light coming from the cavern entrance.",
    RoomKind.OBJECTIVE: "You hear water dripping in this room. The Fountain of Objects is here!",
    RoomKind.PIT: "You stumble into the darkness and fall into a bottomless pit.",
    RoomKind.WHIRLWIND: "A howling maelstrom seizes you and hurls you through the caverns!",
    RoomKind.PREDATOR: "An amarok lunges out of the dark. Its jaws close before you can draw an arrow.",
}

ACTIVATED_OBJECTIVE_DESCRIPTION = (
    "You hear the rushing waters from the Fountain of Objects. It has been reactivated!"
)

SENSE_HINTS = {
    RoomKind.PIT: "You feel a draft. There is a pit in a nearby room.",
    RoomKind.WHIRLWIND: "You hear the growling and groaning of a maelstrom nearby.",
    RoomKind.PREDATOR: "You can smell the rotten stench of an amarok in a nearby room.",
}

LOSS_MESSAGES = {
    RoomKind.PIT: "You fell into a pit and never climbed out.",
    RoomKind.PREDATOR: "The amarok has claimed another wanderer.",
}

WIN_LINES = (
    "The Fountain of Objects has been reactivated, and you have escaped with your life!",
    "You win!",
)

HAZARD_NAMES = {
    RoomKind.PIT: "pit",
    RoomKind.WHIRLWIND: "maelstrom",
    RoomKind.PREDATOR: "amarok",
}


def describe_room(kind: RoomKind, activated: bool = False) -> str:
    if kind is RoomKind.OBJECTIVE and activated:
        return ACTIVATED_OBJECTIVE_DESCRIPTION
    return ROOM_DESCRIPTIONS[kind]
