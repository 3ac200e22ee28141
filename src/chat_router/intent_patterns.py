"""
Locale Pattern Sets

Versioned regex data for the chat router's pattern matchers. Control flow in
intent_classifier and modification_detector iterates these tables and never
names a locale, so adding a locale means adding entries here only.

Patterns are compiled case-insensitive. Recipe/search intent patterns are
unanchored (an embedded phrase is enough); negation patterns are anchored to
the whole trimmed message.
"""
import re
from typing import Dict, List, Pattern

PATTERN_SET_VERSION = "3"

_FLAGS = re.IGNORECASE


def _compile(patterns: List[str]) -> List[Pattern]:
    return [re.compile(p, _FLAGS) for p in patterns]


# ============================================================================
# Recipe intent (force tool use instead of chatting)
# ============================================================================

RECIPE_INTENT_PATTERNS: Dict[str, List[Pattern]] = {
    "en": _compile([
        r"\b(?:make|create|generate|give)\s+(?:me\s+)?(?:a\s+)?recipe",
        r"\brecipe\s+(?:for|with|using)\b",
        r"\bwhat\s+(?:can|should)\s+i\s+(?:make|cook|prepare)\b",
        r"\b(?:quick|fast|easy|simple)\s+(?:\d+[- ]?min(?:ute)?s?\s+)?(?:meal|dish|dinner|lunch|breakfast)",
        r"\bcook\s+(?:me\s+)?(?:something|a\s+meal)",
        r"\bi\s+(?:want|need)\s+(?:a\s+)?(?:recipe|meal|dish)",
        r"\bhelp\s+me\s+(?:make|cook|prepare)",
        r"\b(?:find|show|search|look\s+for)\s+(?:me\s+)?(?:some\s+)?(?:\w+\s+)*recipe",
        r"\b(?:find|show|search|look\s+for)\s+(?:me\s+)?(?:some\s+)?\w+\s+(?:recipes|meals|dishes)",
    ]),
    "es": _compile([
        r"\b(?:hazme|haz|crea|genera|dame)\s+(?:una?\s+)?receta",
        r"\breceta\s+(?:de|con|para|usando)\b",
        r"\bqu[ée]\s+(?:puedo|debo)\s+(?:hacer|cocinar|preparar)\b",
        r"\b(?:comida|plato|cena|almuerzo|desayuno)\s+(?:r[áa]pid[oa]|f[áa]cil|simple)",
        r"\b(?:r[áa]pid[oa]|f[áa]cil)\s+(?:comida|plato|cena)",
        r"\bcoc[ií]na(?:me)?\s+(?:algo|una?\s+(?:comida|plato))",
        r"\bquiero\s+(?:una?\s+)?(?:receta|comida|plato)",
        r"\bay[úu]dame\s+a\s+(?:hacer|cocinar|preparar)",
        r"\bprep[áa]rame\s+(?:algo|una?\s+(?:receta|comida))",
        r"\b(?:busca|encuentra|muestra|ens[ée][ñn]ame)\s+(?:me\s+)?(?:unas?\s+)?receta",
        r"\b(?:busca|encuentra|muestra|ens[ée][ñn]ame)\s+(?:me\s+)?recetas\s+(?:de|para)\b",
    ]),
}

# ============================================================================
# Discovery / search intent (force search_recipes)
# ============================================================================

SEARCH_INTENT_PATTERNS: Dict[str, List[Pattern]] = {
    "en": _compile([
        r"\bi\s+(?:want|need)\s+something\s+(?:sweet|light|healthy|quick|different|new)\b",
        r"\bsomething\s+(?:sweet|light|healthy|quick|different|new)\b",
        r"\b(?:show|find|search)\s+(?:me\s+)?(?:more|other|different)\s+(?:recipes?|options?)\b",
        r"\b(?:what\s+else|anything\s+else|something\s+different)\b",
        r"\b(?:dessert|snack|breakfast|lunch|dinner)\s+(?:ideas?|options?)\b",
        r"\bshow\s+me\s+more\s+recipes\b",
    ]),
    "es": _compile([
        r"\b(?:quiero|necesito)\s+algo\s+(?:dulce|ligero|saludable|r[aá]pido|diferente|nuevo)\b",
        r"\balgo\s+(?:dulce|ligero|saludable|r[aá]pido|diferente|nuevo)\b",
        r"\b(?:mu[eé]strame|busca|encuentra)\s+(?:m[aá]s|otras?)\s+(?:recetas?|opciones?)\b",
        r"\b(?:qu[eé]\s+m[aá]s|algo\s+diferente|otra\s+opci[oó]n)\b",
        r"\b(?:postres?|snacks?|desayunos?|comidas?|cenas?)\s+(?:ideas?|opciones?)\b",
        r"\bmu[eé]strame\s+m[aá]s\s+recetas\b",
    ]),
}

# ============================================================================
# Conversational negations (a plain decline, never a modification)
# ============================================================================

_END = r"[\s.!]*$"

NEGATION_PATTERNS: Dict[str, List[Pattern]] = {
    "en": _compile([
        r"^(?:no|nope|nah)" + _END,
        r"^no[\s,]+thanks?" + _END,
        r"^no[\s,]+thank\s+you" + _END,
        r"^no[\s,]+that['’]?s\s+(?:fine|ok(?:ay)?|good|all|it)" + _END,
        r"^no[\s,]+i['’]?m\s+(?:good|fine|ok(?:ay)?|all\s+(?:set|good))" + _END,
        r"^no[\s,]+(?:it['’]?s\s+)?(?:fine|good|ok(?:ay)?)" + _END,
    ]),
    "es": _compile([
        r"^no[\s,]+gracias" + _END,
        r"^no[\s,]+est[áa]\s+bien" + _END,
        r"^no[\s,]+as[íi]\s+est[áa]\s+bien" + _END,
        r"^no[\s,]+(?:todo\s+)?bien" + _END,
    ]),
}

# ============================================================================
# Modification heuristic families, tried in this order
# ============================================================================

SERVING_SIZE_PATTERNS: List[Pattern] = _compile([
    r"\b(?:make|adjust|scale)\s+(?:it\s+)?(?:for|to)\s+(\d+)\s*(?:people|persons|servings?)\b",
    r"\b(?:haz|hazlo|ajusta|ajústalo|escala)\s+(?:para|a)\s+(\d+)\s*(?:personas?|porciones?)\b",
])

DIETARY_ADAPTATION_PATTERNS: List[Pattern] = _compile([
    r"\b(?:make|turn)\s+it\s+(vegan|vegetarian|gluten[-\s]?free|dairy[-\s]?free|keto)\b",
    r"\b(vegan|vegetarian|gluten[-\s]?free|dairy[-\s]?free)\s+version\b",
    r"\b(?:haz|hazlo|vu[eé]lvelo)\s+(vegano|vegetariano|sin\s+gluten|sin\s+l[áa]cteos)\b",
    r"\bversi[oó]n\s+(vegana|vegetariana|sin\s+gluten|sin\s+l[áa]cteos)\b",
])

SPEED_PATTERNS: List[Pattern] = _compile([
    r"\b(?:make|keep)\s+it\s+(faster|quicker|simpler)\b",
    r"\b(?:simplify|speed\s+it\s+up|faster\s+version|quick\s+version)\b",
    r"\bhazlo?\s+m[áa]s\s+r[áa]pido\b",
    r"\b(?:simplifica|versi[oó]n\s+r[áa]pida|m[áa]s\s+r[áa]pido)\b",
])

# Kept specific to avoid conversational false positives. The bare "No X"
# pattern is last so the Spanish "no pongas" / "no me gusta" forms win.
REMOVAL_PATTERNS: List[Pattern] = _compile([
    r"\b(?:remove|without|skip|omit|drop|leave\s+out|hold\s+the|take\s+out|get\s+rid\s+of)\s+(?:the\s+)?(.+)",
    r"\bi\s+(?:don't|dont|do\s+not)\s+(?:like|want|eat)\s+(.+)",
    r"\bi\s+(?:can't|cant|cannot)\s+(?:eat|have)\s+(.+)",
    r"\bi(?:'m|\s+am)\s+(?:allergic|intolerant)\s+to\s+(.+)",
    r"\bno\s+(?:pongas|le\s+pongas|agregues|a[ñn]adas|uses|quiero)\s+(?:el|la|los|las)?\s*(.+)",
    r"\bno\s+me\s+(?:gusta|gustan)\s+(?:el|la|los|las)?\s*(.+)",
    r"\bsoy\s+al[ée]rgic[oa]\s+(?:a\s+las|a\s+los|a\s+la|al|a)\s+(.+)",
    r"\b(?:quita|quitale|elimina|saca)\s+(?:el|la|los|las)?\s*(.+)",
    r"\bsin\s+(?:el|la|los|las)?\s*(.+)",
    r"^no\s+(?!thanks|thank|gracias|no|,|\.)\s*(?:the\s+)?(.+)",
])

SUBSTITUTION_PATTERNS: List[Pattern] = _compile([
    r"\b(?:swap|replace|substitute|switch|change|use)\s+(?:the\s+)?(.+?)\s+(?:for|with|instead\s+of|to)\s+(.+)",
    r"\binstead\s+of\s+(.+?)(?:,?\s+use|\s+put)\s+(.+)",
    r"\b(?:cambia|reemplaza|sustituye|pon)\s+(?:el|la|los|las)?\s*(.+?)\s+(?:por|con)\s+(.+)",
    r"\ben\s+(?:vez|lugar)\s+de\s+(.+?)(?:,?\s+(?:usa|pon|ponle))\s+(.+)",
])

ADDITION_PATTERNS: List[Pattern] = _compile([
    r"\b(?:add|include|put\s+in|throw\s+in)\s+(?:some\s+)?(.+)",
    r"\bcan\s+(?:you|we)\s+add\s+(.+)",
    r"\b(?:agrega|a[ñn]ade|ponle|a[ñn][áa]dele|mete|incluye)\s+(.+)",
    r"\b(?:puedes|podr[íi]as)\s+(?:agregar|a[ñn]adir|ponerle)\s+(.+)",
])

# "more/less" only at sentence start so "tell me more about" stays out
ADJUSTMENT_PATTERNS: List[Pattern] = _compile([
    r"\bmake\s+it\s+(more\s+\w+|less\s+\w+|\w+(?:er|ier))",
    r"^(more|less)\s+(\w+)",
    r"\b(increase|decrease|reduce|lower|raise)\s+(?:the\s+)?(.+)",
    r"\btoo\s+(\w+)",
    r"\bnot\s+(\w+)\s+enough",
    r"\bm[áa]s\s+(\w+)",
    r"\bmenos\s+(\w+)",
    r"\bhazlo?\s+m[áa]s\s+(\w+)",
    r"\bque\s+(?:sea|quede)\s+m[áa]s\s+(\w+)",
    r"\bmuy\s+(\w+)",
    r"\bdemasiado\s+(\w+)",
])


def all_locales(table: Dict[str, List[Pattern]]) -> List[Pattern]:
    """Flatten a locale table into one ordered pattern list."""
    return [pattern for patterns in table.values() for pattern in patterns]
