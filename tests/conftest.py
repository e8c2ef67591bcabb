import copy

import pytest


HEADS_UP_HAND = {
    "HandNum": 1,
    "GameVariant": "HOLDEM",
    "BetStructure": "NOLIMIT",
    "StartDateTimeUTC": "2025-10-26T12:34:56.1234567Z",
    "FlopDrawBlinds": {
        "SmallBlindAmt": 1,
        "BigBlindAmt": 2,
        "ButtonPlayerNum": 1,
        "SmallBlindPlayerNum": 1,
        "BigBlindPlayerNum": 2,
    },
    "Players": [
        {
            "PlayerNum": 1,
            "Name": "alice",
            "StartStackAmt": 100,
            "EndStackAmt": 102,
            "HoleCards": ["ah kd"],
            "CumulativeWinningsAmt": 2,
        },
        {
            "PlayerNum": 2,
            "Name": "bob",
            "StartStackAmt": 100,
            "EndStackAmt": 98,
            "HoleCards": ["10s 10c"],
            "CumulativeWinningsAmt": -2,
        },
    ],
    "Events": [
        {"EventType": "CALL", "PlayerNum": 1, "BetAmt": 2},
        {"EventType": "CHECK", "PlayerNum": 2, "BetAmt": 0},
        {"EventType": "BOARD CARD", "PlayerNum": 0, "BetAmt": 0, "BoardCards": "10h"},
        {"EventType": "BOARD CARD", "PlayerNum": 0, "BetAmt": 0, "BoardCards": "kc"},
        {"EventType": "BOARD CARD", "PlayerNum": 0, "BetAmt": 0, "BoardCards": "2s"},
        {"EventType": "CHECK", "PlayerNum": 2, "BetAmt": 0},
        {"EventType": "CHECK", "PlayerNum": 1, "BetAmt": 0},
        {"EventType": "BOARD CARD", "PlayerNum": 0, "BetAmt": 0, "BoardCards": "9d"},
        {"EventType": "CHECK", "PlayerNum": 2, "BetAmt": 0},
        {"EventType": "CHECK", "PlayerNum": 1, "BetAmt": 0},
        {"EventType": "BOARD CARD", "PlayerNum": 0, "BetAmt": 0, "BoardCards": "3c"},
        {"EventType": "CHECK", "PlayerNum": 2, "BetAmt": 0},
        {"EventType": "CHECK", "PlayerNum": 1, "BetAmt": 0},
    ],
}


@pytest.fixture
def hand_dict():
    return copy.deepcopy(HEADS_UP_HAND)


@pytest.fixture
def gfx_data(hand_dict):
    return {"Hands": [hand_dict]}
