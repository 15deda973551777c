# 📄 File: app/modules/recommendations/domain/services/care_guide_service.py
# 🧭 Purpose (Layman Explanation):
# Writes a care tip sheet for a plant by looking it up in the built-in handbook, then adds
# advice about any problem the user describes and about their home.
# 🧪 Purpose (Technical Summary):
# Deterministic template-based recommendation generator. Plant matching is substring
# containment of the guide key in the trimmed, lower-cased plant name or species with
# first-match-wins ordering; issue and description advice are keyword rules.
# No model inference is involved.
# 🔗 Dependencies:
# app.modules.recommendations.domain.data.care_guides, re
# 🔄 Connected Modules / Calls From:
# recommendation_service.py, care-instructions endpoint, tests

import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..data.care_guides import CARE_GUIDES, DEFAULT_GUIDE_KEY

CLOSING_NOTE = (
    "\n\n---\n\nThis care guide is specifically tailored for your {name}. "
    "Adjust recommendations based on your specific growing conditions and observe how your "
    "plant responds. Remember that each plant is unique, and care requirements may vary "
    "slightly based on your home environment."
)

GENERIC_BASIC_CARE = """
# Care Guide for {title}

## Watering
- Check the top 1-2 inches of soil; water when dry
- Use room temperature water to avoid shocking roots
- Adjust watering frequency based on season and environment

## Light
- Most houseplants prefer bright, indirect light
- Avoid direct sunlight which can scorch leaves
- Rotate plants regularly to ensure even growth
"""


@dataclass
class CareGuide:
    """Generated care guide: markdown content plus topic tags."""
    content: str
    tags: List[str] = field(default_factory=list)


# =============================================================================
# MATCHING
# =============================================================================

def find_care_guide_key(plant_name: str, plant_species: Optional[str] = None) -> Optional[str]:
    """
    Find the first care guide whose key appears in the plant name or species.

    Args:
        plant_name: User's name for the plant
        plant_species: Optional species

    Returns:
        The matching guide key, or None when only the default guide applies
    """
    name = plant_name.lower().strip()
    species = plant_species.lower() if plant_species else ""

    for key in CARE_GUIDES:
        if key in name or (species and key in species):
            # A name mentioning the general guide itself selects it
            return None if key == DEFAULT_GUIDE_KEY else key
    return None


def _personalize(content: str, key: str, plant_name: str) -> str:
    return re.sub(re.escape(key), lambda _: plant_name, content, flags=re.IGNORECASE)


def _guide_title(plant_name: str, plant_species: Optional[str]) -> str:
    return f"{plant_name} ({plant_species})" if plant_species else plant_name


# =============================================================================
# GENERATION
# =============================================================================

def generate_care_recommendation(
    plant_name: str,
    plant_species: Optional[str] = None,
    care_issue: Optional[str] = None,
    plant_description: Optional[str] = None,
) -> CareGuide:
    """
    Build a care guide for a plant.

    A matched guide has every occurrence of its key replaced by the user's
    plant name. Otherwise the general guide is used under a
    ``# Care Guide for <name>`` heading. Issue and description advice are
    appended when given, followed by a closing note.

    Args:
        plant_name: User's name for the plant
        plant_species: Optional species
        care_issue: Optional problem the user is seeing
        plant_description: Optional free-text description of plant and home

    Returns:
        CareGuide with markdown content and tags
    """
    key = find_care_guide_key(plant_name, plant_species)

    if key is not None:
        guide = CARE_GUIDES[key]
        content = _personalize(guide["content"], key, plant_name)
    else:
        guide = CARE_GUIDES[DEFAULT_GUIDE_KEY]
        default_content = guide["content"]
        # Drop the general heading line, keep everything after it
        body = default_content[default_content.index("\n", 1):]
        content = f"# Care Guide for {_guide_title(plant_name, plant_species)}" + body

    if care_issue:
        content += f"\n\n## Specific Issue: {care_issue}\n"
        content += issue_advice(care_issue)

    if plant_description:
        content += "\n\n## Based on Your Description\n"
        content += f'You mentioned: "{plant_description}"\n\n'
        content += description_advice(plant_description)

    content += CLOSING_NOTE.format(name=plant_name)
    return CareGuide(content=content, tags=list(guide["tags"]))


def build_title(plant_name: str, care_issue: Optional[str] = None) -> str:
    """Title for a stored recommendation."""
    if care_issue:
        return f"{plant_name}: {care_issue[:1].upper()}{care_issue[1:]}"
    return f"Care tips for your {plant_name}"


def basic_care_instructions(plant_name: str, plant_species: Optional[str] = None) -> str:
    """
    Short care instructions: the title, watering and light sections of the
    matched guide, or a generic guide when the plant is not recognised.
    """
    key = find_care_guide_key(plant_name, plant_species)
    if key is None:
        return GENERIC_BASIC_CARE.format(title=_guide_title(plant_name, plant_species))

    sections = "##".join(CARE_GUIDES[key]["content"].split("##")[:3])
    return _personalize(sections, key, plant_name)


# =============================================================================
# ADVICE RULES
# =============================================================================

def _contains_any(text: str, *words: str) -> bool:
    return any(word in text for word in words)


def issue_advice(issue: str) -> str:
    """
    Advice paragraph for a described plant problem. First matching rule wins.
    """
    text = issue.lower()

    if "yellow" in text and _contains_any(text, "leaf", "leaves"):
        return YELLOW_LEAVES_ADVICE
    if "brown" in text and _contains_any(text, "tip", "edge"):
        return BROWN_TIPS_ADVICE
    if _contains_any(text, "drooping", "wilting"):
        return DROOPING_ADVICE
    if "spots" in text:
        if _contains_any(text, "brown", "black"):
            return DARK_SPOTS_ADVICE
        if _contains_any(text, "white", "powder"):
            return WHITE_SPOTS_ADVICE
    if _contains_any(text, "stretching", "leggy"):
        return LEGGY_ADVICE
    if _contains_any(text, "pest", "bug", "insect"):
        return PEST_ADVICE

    return GENERAL_TROUBLESHOOTING_ADVICE.format(issue=issue)


def description_advice(description: str) -> str:
    """
    Advice assembled from keywords in a free-text description.

    Light, watering habit, humidity and pet paragraphs accumulate; a general
    paragraph is returned when nothing matched.
    """
    text = description.lower()
    advice = ""

    if _contains_any(text, "window", "light"):
        if _contains_any(text, "south", "west"):
            advice += BRIGHT_WINDOW_ADVICE
        elif _contains_any(text, "north", "east"):
            advice += GENTLE_WINDOW_ADVICE
        elif _contains_any(text, "low light", "dark"):
            advice += LOW_LIGHT_ADVICE

    if _contains_any(text, "water", "moist", "dry"):
        if _contains_any(text, "forget", "busy"):
            advice += FORGETFUL_WATERING_ADVICE
        elif _contains_any(text, "overwater", "too much water"):
            advice += OVERWATERING_ADVICE

    if _contains_any(text, "humid", "bathroom", "kitchen"):
        advice += HUMID_HOME_ADVICE
    elif _contains_any(text, "dry", "heat", "air conditioner"):
        advice += DRY_HOME_ADVICE

    if _contains_any(text, "cat", "dog", "pet"):
        advice += PET_SAFETY_ADVICE

    return advice or NO_MATCH_DESCRIPTION_ADVICE


# =============================================================================
# ADVICE TEXT
# =============================================================================

YELLOW_LEAVES_ADVICE = """Yellow leaves are most commonly caused by overwatering. Ensure you're allowing the soil to dry appropriately between waterings. Check that your pot has proper drainage and that water isn't collecting in the saucer.

Other potential causes include:
- Nutrient deficiency (especially nitrogen)
- Too much direct sunlight
- Pest infestation (check under leaves for insects)
- Natural aging (if only affecting older, lower leaves)

For your specific plant, reduce watering frequency and monitor for improvement over the next 2-3 weeks."""

BROWN_TIPS_ADVICE = """Brown leaf tips or edges most commonly indicate low humidity or inconsistent watering. This is especially common with tropical plants.

Try these solutions:
- Increase humidity around your plant (use a humidifier or pebble tray)
- Use filtered water instead of tap water (minerals in tap water can cause browning)
- Maintain a more consistent watering schedule
- Ensure the plant isn't near heating vents or drafty windows

The existing brown areas won't return to green, but new growth should be healthy once the environment is adjusted."""

DROOPING_ADVICE = """Drooping or wilting leaves typically indicate either underwatering or overwatering:

If the soil is dry several inches down:
- Your plant needs water immediately
- Consider increasing watering frequency slightly
- Ensure water is penetrating through all the soil, not just running down the sides of the pot

If the soil is still moist:
- You may be overwatering, causing root stress
- Allow the soil to dry out more between waterings
- Check that the pot has proper drainage
- Look for signs of root rot (dark, mushy roots with an unpleasant smell)

Recovery from severe wilting can take time, so be patient after adjusting your care routine."""

DARK_SPOTS_ADVICE = """Brown or black spots on leaves can be caused by several issues:

Fungal infection:
- Remove affected leaves
- Improve air circulation around the plant
- Avoid getting water on the leaves when watering
- Consider a fungicide if the problem persists

Bacterial infection:
- Isolate the plant from others
- Remove and dispose of affected leaves
- Avoid misting or overhead watering
- Ensure good air circulation

Sunburn:
- Move plant away from direct, intense sunlight
- Provide filtered light instead

Water spots:
- If spots appear after watering, minerals in your water may be causing damage
- Consider using filtered or distilled water"""

WHITE_SPOTS_ADVICE = """White spots or powdery substance on leaves typically indicates powdery mildew or a pest infestation:

Powdery mildew (fungal infection):
- Improve air circulation around the plant
- Reduce humidity around the foliage (while maintaining appropriate humidity for the plant type)
- Remove severely affected leaves
- Apply a fungicide specifically formulated for powdery mildew

Pest infestation (likely mealybugs or scale):
- Isolate the plant from others
- Wipe leaves with a cotton swab dipped in 70% isopropyl alcohol
- For serious infestations, treat with insecticidal soap or neem oil
- Repeat treatments weekly until resolved"""

LEGGY_ADVICE = """Stretching or leggy growth almost always indicates insufficient light. Plants naturally grow toward light sources and will become elongated when trying to reach adequate light.

Solutions:
- Move your plant to a brighter location
- Rotate the plant regularly to encourage even growth
- Consider supplemental grow lights if adequate natural light isn't available
- For severely leggy plants, pruning may encourage fuller growth once lighting is corrected

Once in better light, new growth should be more compact, but the stretched portions won't revert to a more compact form."""

PEST_ADVICE = """For pest infestations, proper identification is key to effective treatment:

Common houseplant pests and treatments:

Spider mites:
- Tiny spider-like pests that cause stippling on leaves; may create fine webbing
- Increase humidity (they prefer dry conditions)
- Spray plants with water to dislodge mites
- Apply insecticidal soap or neem oil

Mealybugs:
- White, cottony insects found in leaf joints and under leaves
- Remove with cotton swab dipped in 70% isopropyl alcohol
- Treat with insecticidal soap or neem oil

Scale:
- Small, brown, shell-like insects that attach to stems and leaves
- Physically remove with fingernail or cotton swab with alcohol
- Treat with horticultural oil

Fungus gnats:
- Small flying insects in the soil
- Allow soil to dry thoroughly between waterings
- Use sticky traps
- Treat soil with BTI (Bacillus thuringiensis israelensis) products

For any pest treatment, repeat applications every 7-10 days for at least three treatments to break the life cycle."""

GENERAL_TROUBLESHOOTING_ADVICE = """For your issue regarding "{issue}", first observe these best practices:

1. Examine the plant thoroughly, including stems, under leaves, and soil surface
2. Consider recent changes in care, location, or environment
3. Document the progression of symptoms with photos
4. Isolate the plant if you suspect pests or disease

General troubleshooting steps:
- Check watering habits (over or under watering is the most common issue)
- Evaluate light conditions
- Inspect for pests
- Consider temperature and humidity levels
- Look for signs of outgrowing current pot

If symptoms worsen or the plant's condition deteriorates rapidly, consider consulting with a local plant specialist or garden center."""

BRIGHT_WINDOW_ADVICE = (
    "You mentioned a south or west-facing location, which typically provides bright or "
    "direct light. Monitor your plant for signs of sun stress (scorching or bleaching of "
    "leaves) especially during summer months when light is most intense. Consider a "
    "sheer curtain to filter the strongest midday and afternoon light.\n\n"
)

GENTLE_WINDOW_ADVICE = (
    "Your north or east-facing location provides gentler light, which works well for "
    "many houseplants. If your plant shows signs of stretching toward the light, it may "
    "need a brighter spot or rotating regularly.\n\n"
)

LOW_LIGHT_ADVICE = (
    "You've described a low light environment. Consider low-light tolerant plants like "
    "snake plants, ZZ plants, or pothos. Most flowering plants and those with variegated "
    "leaves will need brighter conditions to thrive. You might want to consider "
    "supplemental grow lights if natural light is limited.\n\n"
)

FORGETFUL_WATERING_ADVICE = (
    "Since you mentioned you sometimes forget to water or have a busy schedule, consider "
    "plants that tolerate irregular watering like succulents, ZZ plants, snake plants, "
    "or pothos. Setting calendar reminders or using a moisture meter can help establish "
    "a better watering routine.\n\n"
)

OVERWATERING_ADVICE = (
    "You mentioned concerns about overwatering. Always check that soil is dry to the "
    "appropriate depth before watering again. Consider using pots with drainage holes "
    "and well-draining soil mixes. A moisture meter can be helpful for those who tend to "
    "overwater.\n\n"
)

HUMID_HOME_ADVICE = (
    "Your description indicates a potentially humid environment. Plants like ferns, "
    "calatheas, and other tropical varieties would likely thrive in these conditions. If "
    "you're growing plants that prefer lower humidity, ensure good air circulation to "
    "prevent fungal issues.\n\n"
)

DRY_HOME_ADVICE = (
    "Your home environment sounds like it may be on the drier side. Consider using a "
    "humidifier or pebble trays for humidity-loving plants. Plants like succulents, "
    "cacti, and snake plants will naturally do better in drier conditions.\n\n"
)

PET_SAFETY_ADVICE = (
    "You mentioned having pets. It's important to verify that your plants are non-toxic "
    "to animals. Some pet-friendly options include spider plants, Boston ferns, areca "
    "palms, and calathea varieties. Avoid lilies, pothos, philodendrons, and many other "
    "common houseplants that can be toxic if ingested by pets.\n\n"
)

NO_MATCH_DESCRIPTION_ADVICE = (
    "Based on your description, continue to observe how your plant responds to its "
    "current care routine and environment. Make small adjustments as needed based on "
    "your plant's signals (leaf color, growth patterns, soil moisture). Taking progress "
    "photos every few weeks can help you track subtle changes in your plant's health and "
    "growth."
)
