WAT_TIPS = {
    "preparation": [
        "Practice daily with random words for 10-15 minutes",
        "Focus on positive, action-oriented responses",
        "Avoid negative words like \"no\", \"never\", \"can't\"",
        "Keep responses natural and authentic",
        "Think of practical, real-life applications",
    ],
    "duringTest": [
        "Write the first thought that comes to mind",
        "Don't overthink or try to be too clever",
        "Keep responses concise but complete",
        "Maintain a positive mindset throughout",
        "If stuck, move to the next word quickly",
    ],
    "examples": {
        "good": [
            {"word": "Failure", "response": "Failure teaches the way to success."},
            {"word": "Leader", "response": "Leader inspires others by example."},
            {"word": "Challenge", "response": "Challenge brings out the best in people."},
        ],
        "avoid": [
            {"word": "Failure", "response": "Failure is bad.", "reason": "Too negative and simple"},
            {"word": "Leader", "response": "Leader gives orders.", "reason": "Authoritarian view"},
            {"word": "Problem", "response": "Problem should be avoided.", "reason": "Avoidance mindset"},
        ],
    },
    "mindset": [
        "Stay calm and composed",
        "Trust your instincts",
        "Focus on solutions, not problems",
        "Think like a leader",
        "Be authentic and honest",
    ],
}
