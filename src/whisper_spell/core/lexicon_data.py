"""Static lexicon and corpus tables.

Plain data only. ``whisper_spell.core.lexicon`` freezes and validates these
tables once per process; nothing else should read them directly.
"""

from __future__ import annotations

from typing import Final

# Integer weights keep classification free of float rounding.
INTENT_KEYWORDS: Final[dict[str, dict[str, int]]] = {
    "protection": {
        "protect": 3,
        "guard": 3,
        "shield": 3,
        "ward": 3,
        "defend": 3,
        "safe": 2,
        "shelter": 2,
        "home": 2,
        "harm": 2,
        "danger": 2,
        "threat": 2,
        "secure": 2,
        "house": 1,
        "family": 1,
        "watch": 1,
    },
    "revelation": {
        "reveal": 3,
        "truth": 3,
        "vision": 3,
        "clarity": 3,
        "understand": 3,
        "know": 2,
        "secret": 2,
        "hidden": 2,
        "answer": 2,
        "seek": 2,
        "dream": 2,
        "find": 2,
        "learn": 2,
        "show": 1,
        "why": 1,
    },
    "binding": {
        "bind": 3,
        "bond": 3,
        "oath": 3,
        "vow": 3,
        "unite": 3,
        "bound": 2,
        "together": 2,
        "promise": 2,
        "join": 2,
        "loyal": 2,
        "marry": 2,
        "forever": 2,
        "commit": 2,
        "tie": 1,
        "stay": 1,
    },
    "transformation": {
        "change": 3,
        "transform": 3,
        "become": 3,
        "rebirth": 3,
        "evolve": 3,
        "grow": 2,
        "heal": 2,
        "shift": 2,
        "different": 2,
        "renew": 2,
        "better": 1,
        "new": 1,
        "turn": 1,
    },
    "summoning": {
        "summon": 3,
        "attract": 3,
        "beckon": 3,
        "call": 2,
        "bring": 2,
        "invite": 2,
        "luck": 2,
        "love": 2,
        "money": 2,
        "wealth": 2,
        "arrive": 2,
        "draw": 1,
        "need": 1,
    },
    "banishment": {
        "banish": 3,
        "remove": 3,
        "expel": 3,
        "begone": 3,
        "purge": 3,
        "cleanse": 3,
        "away": 2,
        "curse": 2,
        "evil": 2,
        "nightmare": 2,
        "fear": 2,
        "stop": 2,
        "break": 2,
        "leave": 1,
        "drive": 1,
    },
    "preservation": {
        "preserve": 3,
        "remember": 3,
        "memory": 3,
        "maintain": 3,
        "endure": 3,
        "keep": 2,
        "last": 2,
        "forget": 2,
        "hold": 2,
        "always": 2,
        "save": 2,
        "past": 2,
        "old": 1,
    },
    "passage": {
        "journey": 3,
        "travel": 3,
        "depart": 3,
        "transition": 3,
        "goodbye": 3,
        "path": 2,
        "road": 2,
        "cross": 2,
        "move": 2,
        "threshold": 2,
        "begin": 2,
        "start": 2,
        "death": 2,
        "trip": 2,
        "door": 1,
    },
}

INTENT_SYMBOLS: Final[dict[str, tuple[str, ...]]] = {
    "protection": ("◯", "═", "║", "⊙"),
    "revelation": ("◉", "△", "✧", "☽"),
    "binding": ("∞", "⊗", "≡", "◈"),
    "transformation": ("∿", "⊕", "◬", "⟡"),
    "summoning": ("✶", "⊛", "◎", "⋆"),
    "banishment": ("✕", "⊘", "▽", "⨯"),
    "preservation": ("◇", "▣", "⊡", "❖"),
    "passage": ("⇢", "◌", "⊹", "⟐"),
}

RITUAL_STEPS: Final[dict[str, tuple[str, ...]]] = {
    "protection": (
        "Scatter a line of salt across the threshold at dusk",
        "Set a smooth stone on each windowsill facing north",
        "Draw a circle of ash around the bed before sleep",
        "Bury an iron nail and a pinch of salt beneath the doorstep",
        "Sprinkle spring water at each corner of the house",
        "Hang a bay leaf above the doorway with red thread",
        "Press a thumbprint of ash onto the lintel at midnight",
        "Place a bowl of salt water beside the bed",
        "Wrap a small bone in black cord and keep it at the threshold",
        "Trace the shape of a shield in salt on the floor",
        "Tuck a rowan leaf into the pocket of your coat",
        "Lay a river stone on the hearth and name each person it must guard",
        "Wash the front step with cold water at dawn",
        "Bind a sprig of root and thorn with ribbon and hang it by the hearth",
        "Breathe three times over a handful of salt, then cast it outward",
        "Mark the four walls with ash in the sign of the cross",
        "Set a candle on a flat stone and let it burn down in the dark",
        "Pour a thin ring of water around the garden gate",
        "Carry a hag stone in the left hand while walking the boundary",
        "Fold a dried leaf into a letter naming what you protect",
        "Mix ash with oil and anoint the door handle",
        "Bury a fox bone at the crossroads nearest your home",
        "Fill a glass jar with salt, nails and rosemary, and seal it with wax",
        "Place a stone under the pillow of each sleeper",
        "Whisper the names of the household over a cup of water",
        "Tie a root of angelica above the cradle or bed",
        "Sweep salt from the back of the house toward the front door",
        "Set a bay leaf under the doormat facing east",
        "Rub ash along the windowsills after sunset",
        "Stand at the threshold holding a stone until your breath is calm",
    ),
    "revelation": (
        "Gaze into a bowl of still water by candlelight",
        "Burn a bay leaf and read the shape of its ash",
        "Hold a clear stone to your brow before sleep",
        "Write your question on a leaf and float it on water",
        "Cast nine small bone chips onto a cloth and note where they fall",
        "Drop salt into a dark glass of water and watch it settle",
        "Keep a smooth stone in your closed hand until the answer comes",
        "Scatter ash over a mirror and trace the first letter you see",
        "Sleep with a mugwort leaf beneath your pillow",
        "Pour water over a key at midnight and listen",
        "Turn a stone three times in your palm facing east",
        "Read the veins of a fallen leaf at dawn",
        "Draw an open eye in salt on the table",
        "Dip your fingers in water and touch your eyelids",
        "Burn a strand of hair with a pinch of salt and breathe the smoke",
        "Lay a root on the windowsill under the full moon",
        "Carry a hollow bone to a quiet place and speak the question into it",
        "Let a drop of ink fall into a bowl of water and read the bloom",
        "Rub ash between your palms and close your eyes",
        "Set a stone at the crossroads and return for it on the third night",
        "Fold a leaf into the shape of a door",
        "Sprinkle salt on the threshold and step over it backward",
        "Count the ripples when a stone breaks still water",
        "Write the hidden thing on paper, burn it, and keep the ash",
        "Place a cup of water beside the bed and drink it at dawn",
        "Hold a dried root to the candle flame until it smokes",
        "Balance a bone on its end in the dark",
        "Trace a spiral of salt and sit at its center",
        "Tear a leaf in half and compare the two edges",
        "Breathe on cold stone and read the fog it holds",
    ),
    "binding": (
        "Knot red thread around a stone and a ring and bury them together",
        "Braid three strands of cord over a bowl of salt",
        "Write both names on a leaf and fold it inward",
        "Seal a jar of honey and salt with wax at midnight",
        "Tie a knot in a ribbon for each promise, dipped in water",
        "Press a leaf from each garden together in a heavy book",
        "Pour water from two cups into one bowl",
        "Bind a small bone to a twig with black thread",
        "Set a stone and a shell side by side on the windowsill facing west",
        "Wrap a root in ribbon and plant it where both of you walk",
        "Mix salt and honey and share it from one spoon",
        "Trace both initials in ash on the same page",
        "Lay a stone on the written vow and leave it until dawn",
        "Thread a bead onto cord for every oath spoken over water",
        "Bury a knotted root at the crossroads",
        "Sprinkle salt in a figure eight around two candles",
        "Drink from one cup of water after speaking the vow aloud",
        "Tie a leaf to a door handle with a single long thread",
        "Mark the palms of both hands with ash",
        "Hold one stone between two clasped hands under the new moon",
        "Twist a root around a twig and set it in a pot of earth",
        "Dissolve a pinch of salt in warm water and stir it sunwise",
        "Keep a shared bone charm in a closed box",
        "Fold paper around a pinch of ash and stitch it shut",
        "Place a leaf under each pillow in the house",
        "Carve both names into soft stone",
        "Bind a bundle of rosemary and salt with seven knots",
        "Wrap cord around a river stone until none of it shows",
        "Sprinkle water on the knot and whisper the bond by the hearth",
        "Tie a thread from your wrist to a root in the garden at dusk",
    ),
    "transformation": (
        "Burn an old letter and mix its ash with fresh soil",
        "Drop a stone into running water and walk away without looking back",
        "Plant a seed beside a broken root",
        "Bathe your hands in salt water at dawn",
        "Write the old name on a leaf and let the wind take it",
        "Paint a new sign in ash on a clean stone",
        "Pick a dead leaf from a house plant and bury it",
        "Melt wax over a small bone and reshape it",
        "Pour water from a cracked cup into a whole one",
        "Rub salt on a mirror, then wash it clean",
        "Carry a stone uphill and leave it at the top",
        "Snip a root and set it in a glass of water",
        "Mix ash and honey and taste a single drop",
        "Turn in a circle three times with a leaf in each hand",
        "Cross a stream of water on the first morning of the month",
        "Scatter salt on a path you no longer wish to walk",
        "Grind a dry leaf to dust and blow it eastward",
        "Set a stone in the fire and let it cool before sleep",
        "Sprinkle ash over fresh snow or cold earth",
        "Wash an old garment in salt water and hang it facing south",
        "Break a dry bone and keep only the larger piece",
        "Plant a root cutting under the new moon",
        "Swap the stone on your desk for one found at the crossroads",
        "Soak a leaf in water overnight and watch its colour fade",
        "Draw a spiral in ash from the outside inward",
        "Dissolve salt in a bath and stay until the water cools",
        "Tie a ribbon around a root and untie it at dawn",
        "Leave a bowl of water in the sun until half of it is gone",
        "Drop a pinch of salt into candle flame and name what you release",
        "Place a fresh leaf where the old photograph stood",
    ),
    "summoning": (
        "Light a candle on a flat stone and speak the name three times",
        "Pour a ring of honey and salt around a green candle",
        "Set a bowl of water in the window under the full moon",
        "Whisper your wish into a leaf and tuck it into your shoe",
        "Lay a coin on a stone at the crossroads",
        "Sprinkle cinnamon and salt along the front path toward the door",
        "Float a bay leaf in water and blow it toward you",
        "Draw an open hand in ash on the doorstep",
        "Carry a magnet stone wrapped in green ribbon",
        "Plant a root of ginger near the front door",
        "Ring a bell over a cup of water at dawn",
        "Place a small bone of a bird on the sill to call messages home",
        "Write the invitation on a leaf and leave it by the hearth",
        "Scatter sugar and salt on the threshold after sunset",
        "Set out a plate of bread and a cup of water at midnight",
        "Tie a key to a root with red thread",
        "Draw a beckoning spiral of ash toward the center of the room",
        "Fill a bowl with water and drop in three coins facing east",
        "Place a white stone in each corner of the room",
        "Burn a dried leaf and wave the smoke toward yourself",
        "Sprinkle water on the palms and open them upward",
        "Blow softly across a hollow bone at the doorway",
        "Bury a honey-soaked root in a pot by the window",
        "Draw a line of salt from the door to your chair",
        "Hang a leaf from a thread in the open window",
        "Place a smooth stone in your pocket and touch it whenever you wait",
        "Mix ash with milk and mark the doorframe",
        "Leave a cup of water on the step overnight",
        "Set a candle on a bed of salt and let it burn down",
        "Hold a leaf to your lips and speak the name before sleep",
    ),
    "banishment": (
        "Sweep salt out of the front door and away from the house",
        "Throw a stone into a river and turn away at dusk",
        "Burn a written name and scatter the ash at the crossroads",
        "Pour salt water down the drain while naming what must leave",
        "Bury a bone far from home and do not mark the place",
        "Crush a dry leaf underfoot at the edge of your land",
        "Spit onto a stone and cast it over your left shoulder",
        "Wash the floor with vinegar and salt from back to front",
        "Smudge each room with a burning leaf of sage and open a window",
        "Drop an iron nail into a jar of salt and seal it",
        "Draw a line of ash across the threshold after sunset",
        "Throw water over your shoulder without looking back",
        "Cut a root in two and bury the halves apart",
        "Break a small bone and leave it at the boundary",
        "Scatter black salt around the outside walls",
        "Burn a bay leaf and blow the ash out the window",
        "Place a sharp stone facing outward on the doorstep",
        "Pour water into the earth at the farthest corner of the yard",
        "Write the unwanted thing on paper, wrap it in a leaf, and burn it",
        "Sprinkle ash on the path leading away from your home",
        "Toss a pinch of salt into a fire and step back",
        "Leave a stone at the crossroads and walk on without pausing",
        "Bathe in cold water and let it carry the weight down the drain",
        "Tear a root from the ground and leave it to dry in the sun",
        "Hang a mirror facing the door with a pinch of salt behind it",
        "Sweep ash from each room into one pile and bury it",
        "Throw a handful of salt at the shadow of the door at midnight",
        "Drop a leaf into running water and let it go",
        "Rap on a stone three times and say the word begone",
        "Burn the dry root of a thistle and scatter what remains",
    ),
    "preservation": (
        "Seal a lock of hair in a jar of salt",
        "Press a leaf from the garden between the pages of a book",
        "Set a stone on the grave of the one you remember",
        "Keep a cup of water from a place you love on the shelf",
        "Wrap a small bone in linen and keep it in a drawer",
        "Mix ash from the hearth into the soil of a potted plant",
        "Dip a leaf in wax to keep its colour",
        "Lay a stone in the foundation of the house",
        "Bury a jar of salt and honey under the oldest tree",
        "Trace the family name in ash on the first page of a journal",
        "Pour water over the old root of the garden rose at dawn",
        "Store a stone from your birthplace in a wooden box",
        "Wrap a dried leaf and lavender in cloth and place it among old letters",
        "Sprinkle salt along the shelf where the heirlooms rest",
        "Sit with an old photograph and a cup of water before sleep",
        "Tie a root with thread and hang it to dry in the kitchen",
        "Keep a bone button from a coat that belonged to an elder",
        "Set a leaf from each season in a frame",
        "Rub a pinch of salt into the cover of an old book",
        "Place a stone on the windowsill and speak one memory to it each night",
        "Fill a bottle with water from the local spring and cork it",
        "Keep the ash of a letter in a locket",
        "Plant a root from the old garden in the new one",
        "Bury a smooth stone beneath the doorstep of the family house",
        "Press salt into a candle before lighting it on the anniversary",
        "Set a cup of water beside the old clock at midnight",
        "Lay a leaf on the pillow of a guest who will return",
        "Place a small bone charm in the cradle that was passed down",
        "Mark the year in ash on the back of the photograph",
        "Hold a river stone while reciting the names of the ancestors",
    ),
    "passage": (
        "Step over a line of salt laid across the doorway",
        "Carry a stone from home and leave it at your destination",
        "Wash your feet in water at the threshold before leaving",
        "Tuck a leaf into your shoe for the road ahead",
        "Scatter ash behind you as you leave the old house",
        "Drop a coin into water at the first bridge you cross",
        "Place a small bone in your pack wrapped in ribbon",
        "Light a candle on a stone at the crossroads at dusk",
        "Trace an arrow in salt pointing the way you will go",
        "Tie a thread to a root at the gate and break it when you pass",
        "Pour a cup of water on the ground where you last stood",
        "Mark the soles of your shoes with ash",
        "Set a leaf on the open sill and let the wind carry it",
        "Cross a stream and leave a stone on the far bank",
        "Bathe in salt water on the night before the journey",
        "Keep a root of mandrake in your pocket until you arrive",
        "Sprinkle salt on the last step you take from the house",
        "Hold a bone key and turn it once in the air facing west",
        "Leave a bowl of water outside the old door overnight",
        "Walk through the smoke of a burning leaf at dawn",
        "Place a stone at each corner of the new room",
        "Draw a doorway in ash on the wall and step through it with closed eyes",
        "Drink a mouthful of water from the new place on arrival",
        "Bury a root of the old garden at the new threshold",
        "Scatter salt in the wake of the cart as it leaves",
        "Press a leaf between two maps",
        "Knock three times on a stone before setting out",
        "Pour water across the path so that it runs ahead of you",
        "Carry a pinch of ash from the old hearth in a folded paper",
        "Whisper farewell to a bone buried beneath the doorstep",
    ),
}

INTENT_METAPHORS: Final[dict[str, tuple[str, ...]]] = {
    "protection": ("shield", "wall", "hearth", "lantern", "fortress"),
    "revelation": ("mirror", "open eye", "lamp", "window", "key"),
    "binding": ("knot", "chain", "ring", "braid", "covenant"),
    "transformation": ("chrysalis", "forge", "river", "phoenix", "seed"),
    "summoning": ("beacon", "open door", "bell", "lodestar", "call"),
    "banishment": ("broom", "tide", "cold wind", "closed gate", "ember"),
    "preservation": ("amber", "vault", "archive", "root", "keepsake"),
    "passage": ("bridge", "road", "gate", "crossing", "ferry"),
}

# (template id, pattern, fallback line). Fallback lines are pre-counted
# to sit inside the syllable bounds.
VERSE_TEMPLATES: Final[dict[str, tuple[tuple[str, str, str], ...]]] = {
    "protection": (
        (
            "protection.1",
            "{temporal} … the {metaphor} is {passive_verb}",
            "at dusk the wall is kept, the door is held",
        ),
        (
            "protection.2",
            "the {adjective} {natural_noun} is {passive_verb} {preposition} the {elemental_noun}",
            "the old oak is bound in salt, the gate holds",
        ),
        (
            "protection.3",
            "let {abstract_noun} be {passive_verb} — {preposition} the {mystical_noun}",
            "let no harm come — we hold the ward of salt",
        ),
        (
            "protection.4",
            "by {elemental_noun} and {natural_noun} the {metaphor} is {passive_verb}",
            "by ash and thorn the house is kept through night",
        ),
    ),
    "revelation": (
        (
            "revelation.1",
            "{temporal} the {mystical_noun} is {passive_verb} …",
            "at dawn the veil is drawn, the truth is shown",
        ),
        (
            "revelation.2",
            "{preposition} the {adjective} {metaphor}, {abstract_noun} is {passive_verb}",
            "in the still lamp the truth is seen at last",
        ),
        (
            "revelation.3",
            "what was {passive_verb} {temporal} is now {passive_verb}",
            "what was hid at night is shown in the light",
        ),
        (
            "revelation.4",
            "the {metaphor} of {elemental_noun} is {passive_verb} {preposition} the {natural_noun}",
            "the eye of the moon is turned on the sea",
        ),
    ),
    "binding": (
        (
            "binding.1",
            "{temporal} … two {abstract_noun} are {passive_verb} as one",
            "at dusk two hearts are bound as one and held",
        ),
        (
            "binding.2",
            "the {metaphor} is {passive_verb} {preposition} the {adjective} {natural_noun}",
            "the knot is tied in the old root of oak",
        ),
        (
            "binding.3",
            "by {elemental_noun} and {mystical_noun} our {abstract_noun} is {passive_verb}",
            "by salt and oath our word is kept and held",
        ),
        (
            "binding.4",
            "let the {metaphor} be {passive_verb} — {temporal}",
            "let the ring be closed — now and through all years",
        ),
    ),
    "transformation": (
        (
            "transformation.1",
            "{temporal} … the {metaphor} is {passive_verb}",
            "at dusk the old shape falls, the new form grows",
        ),
        (
            "transformation.2",
            "{abstract_noun} is {passive_verb} in the {adjective} {elemental_noun}",
            "the self is turned in the heat of red flame",
        ),
        (
            "transformation.3",
            "the {natural_noun} is {passive_verb} — {preposition} the {metaphor} it goes",
            "the seed is split — through the dark soil it goes",
        ),
        (
            "transformation.4",
            "by {elemental_noun} and {abstract_noun} what was is {passive_verb}",
            "by fire and will what was is now made new",
        ),
    ),
    "summoning": (
        (
            "summoning.1",
            "{temporal} … the {metaphor} is {passive_verb}",
            "at dusk the bell is rung, the way is made",
        ),
        (
            "summoning.2",
            "come {preposition} the {adjective} {natural_noun}, {abstract_noun} {passive_verb}",
            "come through the dark wood, the call is now heard",
        ),
        (
            "summoning.3",
            "by {elemental_noun} and {mystical_noun} the way is {passive_verb}",
            "by flame and sign the way is cleared for you",
        ),
        (
            "summoning.4",
            "let the {metaphor} be {passive_verb} {preposition} the {elemental_noun}",
            "let the lamp be lit in the wind and rain",
        ),
    ),
    "banishment": (
        (
            "banishment.1",
            "{temporal} … the {abstract_noun} is {passive_verb}",
            "at dusk the dread is cast out and sent far",
        ),
        (
            "banishment.2",
            "{preposition} the {metaphor}, the {adjective} {mystical_noun} is {passive_verb}",
            "out through the gate the dark thing is sent, gone",
        ),
        (
            "banishment.3",
            "by {elemental_noun} and {elemental_noun} all {abstract_noun} is {passive_verb}",
            "by salt and smoke all harm is swept from here",
        ),
        (
            "banishment.4",
            "let the {natural_noun} be {passive_verb} — {temporal}",
            "let the thorn be cut — the path clear by dawn",
        ),
    ),
    "preservation": (
        (
            "preservation.1",
            "{temporal} … the {metaphor} is {passive_verb}",
            "at dusk the vault is sealed, what was is kept",
        ),
        (
            "preservation.2",
            "the {abstract_noun} is {passive_verb} {preposition} the {adjective} {natural_noun}",
            "the past is kept in the old roots of oak",
        ),
        (
            "preservation.3",
            "by {elemental_noun} and {mystical_noun} the {abstract_noun} is {passive_verb}",
            "by wax and seal the old name is held fast",
        ),
        (
            "preservation.4",
            "let {abstract_noun} be {passive_verb} — {temporal}",
            "let all we love be kept from now till dusk",
        ),
    ),
    "passage": (
        (
            "passage.1",
            "{temporal} … the {metaphor} is {passive_verb}",
            "at dawn the gate is wide, the road is clear",
        ),
        (
            "passage.2",
            "{preposition} the {adjective} {natural_noun} the {abstract_noun} is {passive_verb}",
            "through the dark wood the way is found at last",
        ),
        (
            "passage.3",
            "by {elemental_noun} and {elemental_noun} each step is {passive_verb}",
            "by stone and rain each step is laid down",
        ),
        (
            "passage.4",
            "let the {metaphor} be {passive_verb} — {preposition} the {natural_noun}",
            "let the bridge be crossed — on to the far shore",
        ),
    ),
}

SLOT_WORDS: Final[dict[str, tuple[str, ...]]] = {
    "temporal": (
        "at dusk",
        "at dawn",
        "by moonlight",
        "before the dawn",
        "at midnight",
        "when the tide turns",
        "in the hour of ash",
        "as the candles fade",
        "through the long night",
        "when the bells are still",
    ),
    # Past participles only: lines are always in the passive voice.
    "passive_verb": (
        "sealed",
        "bound",
        "kept",
        "woven",
        "kindled",
        "guarded",
        "hallowed",
        "unveiled",
        "remembered",
        "given",
        "spoken",
        "written",
        "gathered",
        "anchored",
        "held",
        "blessed",
        "mended",
        "drawn",
        "named",
        "shielded",
        "veiled",
        "loosened",
        "unbound",
        "released",
        "changed",
        "turned",
        "summoned",
        "banished",
        "preserved",
        "opened",
        "crossed",
    ),
    "mystical_noun": (
        "rune",
        "sigil",
        "oracle",
        "veil",
        "circle",
        "covenant",
        "threshold",
        "omen",
        "charm",
        "relic",
        "altar",
        "spirit",
        "chalice",
    ),
    "natural_noun": (
        "river",
        "willow",
        "hollow",
        "moss",
        "thorn",
        "meadow",
        "orchard",
        "fern",
        "birch",
        "tide",
        "hill",
        "valley",
        "hawthorn",
        "bramble",
    ),
    "abstract_noun": (
        "memory",
        "silence",
        "sorrow",
        "promise",
        "longing",
        "mercy",
        "patience",
        "courage",
        "grief",
        "trust",
        "wonder",
        "stillness",
        "hope",
        "truth",
    ),
    "elemental_noun": (
        "flame",
        "frost",
        "ember",
        "smoke",
        "ash",
        "salt",
        "stone",
        "water",
        "wind",
        "lightning",
        "thunder",
        "rain",
        "iron",
        "starlight",
    ),
    "preposition": (
        "beneath",
        "beyond",
        "within",
        "across",
        "above",
        "below",
        "among",
        "upon",
        "under",
        "through",
        "beside",
        "toward",
    ),
    "adjective": (
        "ancient",
        "silver",
        "quiet",
        "hidden",
        "sleeping",
        "distant",
        "gentle",
        "deep",
        "old",
        "unbroken",
        "silent",
        "golden",
        "secret",
        "low",
        "bright",
        "dark",
    ),
}

MATERIAL_TAGS: Final[tuple[str, ...]] = (
    "ash",
    "salt",
    "water",
    "bone",
    "stone",
    "root",
    "leaf",
    "iron",
    "thread",
    "cord",
    "ribbon",
    "wax",
    "candle",
    "honey",
    "milk",
    "bread",
    "coin",
    "key",
    "mirror",
    "thorn",
    "seed",
    "ink",
    "oil",
    "bell",
)

# Temporal and spatial markers; the first one found in a step is its timing tag.
TIMING_MARKERS: Final[tuple[str, ...]] = (
    "at dawn",
    "at dusk",
    "at midnight",
    "before dawn",
    "before sleep",
    "after sunset",
    "under the new moon",
    "under the full moon",
    "on the third night",
    "overnight",
    "at the threshold",
    "at the crossroads",
    "at the doorway",
    "by the hearth",
    "in the dark",
    "facing north",
    "facing east",
    "facing south",
    "facing west",
)

DURATION_PHRASES: Final[tuple[str, ...]] = (
    "until dawn",
    "three breaths",
    "seven nights",
    "one full turn of the moon",
    "until the candle gutters",
    "nine heartbeats",
    "from dusk to dusk",
    "the space of a held breath",
    "until the ash is cold",
    "one night and one day",
)
