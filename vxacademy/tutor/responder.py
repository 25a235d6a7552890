"""
Keyword-matched replies for the AI tutor. No model is called; the first
topic whose keywords appear in the learner's message wins.
"""
import re

SYSTEM_PROMPT = (
    "You are the VX Academy tutor, helping frontline hospitality staff in Abu Dhabi "
    "with culture, attractions, guest service and language."
)

GREETING = (
    "Hello! I'm your VX Academy tutor. Ask me about Emirati culture, Abu Dhabi attractions, "
    "handling difficult visitors, or useful Arabic phrases."
)

TOPICS = [
    (
        ('culture', 'tradition', 'emirati', 'custom', 'etiquette'),
        "Emirati culture values hospitality, respect and modesty. Greet guests warmly, offer Arabic "
        "coffee (gahwa) and dates where appropriate, use the right hand when offering items, and be "
        "mindful of prayer times and Ramadan customs.",
    ),
    # before attractions: "difficult visitors" also contains "visit"
    (
        ('difficult', 'angry', 'complain', 'upset', 'rude', 'problem'),
        "With a difficult visitor: listen without interrupting, acknowledge their frustration, "
        "apologise for the experience, offer a concrete solution and follow up. Stay calm and involve "
        "a supervisor when needed.",
    ),
    (
        ('attraction', 'visit', 'museum', 'mosque', 'louvre', 'place', 'see'),
        "Popular Abu Dhabi attractions include Sheikh Zayed Grand Mosque, Louvre Abu Dhabi, Qasr Al "
        "Watan, Yas Island theme parks and the Corniche. Check opening hours and dress codes before "
        "recommending a visit.",
    ),
    (
        ('arabic', 'language', 'phrase', 'say', 'word', 'translate'),
        "Useful Arabic phrases: 'Marhaba' (hello), 'Ahlan wa sahlan' (welcome), 'Shukran' (thank "
        "you), 'Afwan' (you're welcome) and 'Ma'a salama' (goodbye).",
    ),
    (
        ('thank', 'thanks', 'help', 'hello', 'hi'),
        "Happy to help! What would you like to learn about today?",
    ),
]

DEFAULT_REPLY = (
    "That's a great question. I can help with Emirati culture, Abu Dhabi attractions, handling "
    "difficult visitors and Arabic phrases. Could you tell me a bit more about what you need?"
)


def initial_messages():
    return [
        {'role': 'system', 'content': SYSTEM_PROMPT},
        {'role': 'assistant', 'content': GREETING},
    ]


def _matches(words, keyword):
    # short keywords ("hi", "see") must match a whole word
    if len(keyword) <= 3:
        return keyword in words
    return any(word.startswith(keyword) for word in words)


def generate_reply(message):
    words = re.findall(r"[a-z]+", message.lower())
    for keywords, reply in TOPICS:
        if any(_matches(words, keyword) for keyword in keywords):
            return reply
    return DEFAULT_REPLY
