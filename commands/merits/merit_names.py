"""
Merit Names

Known Chronicles of Darkness merits with card images, used for lookup
suggestions.
"""

MENTAL_MERITS = [
    "Area of Expertise",
    "Common Sense",
    "Danger Sense",
    "Direction Sense",
    "Eidetic Memory",
    "Encyclopedic Knowledge",
    "Eye for the Strange",
    "Fast Reflexes",
    "Good Time Management",
    "Holistic Awareness",
    "Indomitable",
    "Interdisciplinary Specialty",
    "Investigative Aide",
    "Investigative Prodigy",
    "Language",
    "Library",
    "Meditative Mind",
    "Multilingual",
    "Patient",
    "Professional Training",
    "Tolerance for Biology",
    "Trained Observer",
    "Vice-Ridden",
]

PHYSICAL_MERITS = [
    "Ambidextrous",
    "Automotive Genius",
    "Crack Driver",
    "Demolisher",
    "Double Jointed",
    "Fleet of Foot",
    "Giant",
    "Hardy",
    "Greyhound",
    "Iron Stamina",
    "Parkour",
    "Quick Draw",
    "Relentless",
    "Seizing the Edge",
    "Sleight of Hand",
    "Small-Framed",
    "Stunt Driver",
]

SOCIAL_MERITS = [
    "Allies",
    "Alternate Identity",
    "Anonymity",
    "Barfly",
    "Closed Book",
    "Contacts",
    "Fame",
    "Fast-Talking",
    "Fixer",
    "Hobbyist Clique",
    "Inspiring",
    "Iron Will",
    "Mentor",
    "Mystery Cult Initiation",
    "Pusher",
    "Resources",
    "Retainer",
    "Safe Place",
    "Small Unit Tactics",
    "Spin Doctor",
    "Staff",
    "Status",
    "Striking Looks",
    "Sympathetic",
    "Table Turner",
    "Takes One to Know One",
    "Taste",
    "True Friend",
    "Untouchable",
]

SUPERNATURAL_MERITS = [
    "Aura Reading",
    "Automatic Writing",
    "Biokinesis",
    "Clairvoyance",
    "Curser",
    "Laying on Hands",
    "Medium",
    "Mind of a Madman",
    "Omen Sensitivity",
    "Numbing Touch",
    "Psychokinesis",
    "Psychometry",
    "Telekinesis",
    "Telepathy",
    "Thief of Fate",
    "Unseen Sense",
]

FIGHTING_MERITS = [
    "Armed Defense",
    "Cheap Shot",
    "Choke Hold",
    "Close Quarters Combat",
    "Defensive Combat",
    "Fighting Finesse",
    "Firefight",
    "Grappling",
    "Heavy Weapons",
    "Improvised Weaponry",
    "Iron Skin",
    "Light Weapons",
    "Marksmanship",
    "Martial Arts",
    "Police Tactics",
    "Shiv",
    "Street Fighting",
    "Unarmed Defense",
]

MERIT_NAMES = (
    MENTAL_MERITS
    + PHYSICAL_MERITS
    + SOCIAL_MERITS
    + SUPERNATURAL_MERITS
    + FIGHTING_MERITS
)
