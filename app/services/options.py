"""
Selectable check-in options shown by the mobile client.
Ids are the tags stored on check-in rows; concerning thoughts carry the
severity the classifier reads.
"""

STRUGGLES = [
    {"id": "tired", "text": "I feel exhausted and overwhelmed", "emoji": "😴", "category": "physical"},
    {"id": "sad", "text": "I feel sad or down more than usual", "emoji": "😢", "category": "emotional"},
    {"id": "anxious", "text": "I feel anxious or worried constantly", "emoji": "😰", "category": "emotional"},
    {"id": "guilty", "text": "I feel guilty about my parenting", "emoji": "😔", "category": "emotional"},
    {"id": "isolated", "text": "I feel disconnected from others", "emoji": "😞", "category": "social"},
    {"id": "inadequate", "text": "I feel like I'm not good enough as a mother", "emoji": "😟", "category": "emotional"},
    {"id": "angry", "text": "I feel irritable or angry more often", "emoji": "😠", "category": "emotional"},
    {"id": "hopeless", "text": "I feel hopeless about the future", "emoji": "😰", "category": "emotional"},
    {"id": "physical-pain", "text": "I'm experiencing physical discomfort", "emoji": "😣", "category": "physical"},
    {"id": "sleep-deprived", "text": "I'm struggling with lack of sleep", "emoji": "😵", "category": "physical"},
]

POSITIVE_MOMENTS = [
    {"id": "bonding", "text": "I felt a special connection with my baby", "emoji": "🥰", "category": "bonding"},
    {"id": "successful-feed", "text": "I had a successful breastfeeding session", "emoji": "🌟", "category": "achievement"},
    {"id": "support", "text": "I received helpful support from someone", "emoji": "🤗", "category": "support"},
    {"id": "proud", "text": "I felt proud of my progress", "emoji": "😊", "category": "personal"},
    {"id": "peaceful", "text": "I had a moment of peace and calm", "emoji": "😌", "category": "personal"},
    {"id": "confident", "text": "I felt confident in my abilities", "emoji": "💪", "category": "personal"},
    {"id": "grateful", "text": "I felt grateful for this journey", "emoji": "🙏", "category": "personal"},
    {"id": "baby-milestone", "text": "My baby reached a new milestone", "emoji": "🎉", "category": "bonding"},
    {"id": "self-care", "text": "I took time for self-care", "emoji": "💆‍♀️", "category": "personal"},
    {"id": "community", "text": "I connected with other mothers", "emoji": "👥", "category": "support"},
]

CONCERNING_THOUGHTS = [
    {"id": "harm-thoughts", "text": "I've thought of harming myself or my baby", "emoji": "🚨", "severity": "critical"},
    {"id": "baby-better-off", "text": "I think my baby would be better off without me", "emoji": "💔", "severity": "critical"},
    {"id": "escape-thoughts", "text": "I have thoughts of running away or escaping", "emoji": "🏃‍♀️", "severity": "high"},
    {"id": "intrusive-thoughts", "text": "I have scary thoughts I can't control", "emoji": "😨", "severity": "high"},
    {"id": "regret-baby", "text": "I regret having my baby", "emoji": "😔", "severity": "high"},
    {"id": "failure-thoughts", "text": "I constantly think I'm failing as a mother", "emoji": "😞", "severity": "moderate"},
]


def checkin_options() -> dict:
    # concerning thoughts are already ordered most severe first
    return {
        "struggles": STRUGGLES,
        "positive_moments": POSITIVE_MOMENTS,
        "concerning_thoughts": CONCERNING_THOUGHTS,
    }
