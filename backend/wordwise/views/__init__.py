"""
Views Module
One view per screen of the app. Each view renders a response model from
the shared progress store and the content gateway.

Available Views:
- Home: Word of the day, quote of the day and stats
- Learn: Flashcards for words still to learn
- Practice: Quiz and synonym swipe games
- Search: Reverse dictionary
- Profile: Rank, stats and bookmarks
- Dictionary: Word lookup overlay opened from Home

The ViewController in wordwise.views.controller switches between them.
"""
from wordwise.views.base_view import BaseView
from wordwise.views.home_view import HomeView
from wordwise.views.learn_view import LearnView
from wordwise.views.practice_view import PracticeView, PracticeMode
from wordwise.views.profile_view import ProfileView
from wordwise.views.dictionary_view import DictionaryView, ReverseDictionaryView


__all__ = [
    "BaseView",
    "HomeView",
    "LearnView",
    "PracticeView",
    "PracticeMode",
    "ProfileView",
    "DictionaryView",
    "ReverseDictionaryView"
]
