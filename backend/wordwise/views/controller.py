"""
View Controller
Top-level navigation between the app's views plus the dictionary overlay.

The controller owns the learner's ProgressStore and hands it by reference
to every view. Views are switched through an explicit transition table;
leaving a view runs its on_leave() hook so in-flight work is dropped.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from wordwise.config import Settings, get_settings
from wordwise.core.errors import InvalidTransitionError
from wordwise.core.progress_store import ProgressStore
from wordwise.schemas.navigation import NavigationResponse, NavItemResponse
from wordwise.services.content_gateway import ContentGateway, create_content_gateway
from wordwise.services.daily_cache import DailyCache
from wordwise.services.word_catalog import get_word_catalog
from wordwise.views.base_view import BaseView
from wordwise.views.dictionary_view import DictionaryView, ReverseDictionaryView
from wordwise.views.home_view import HomeView
from wordwise.views.learn_view import LearnView
from wordwise.views.practice_view import PracticeView
from wordwise.views.profile_view import ProfileView

logger = logging.getLogger(__name__)


class ViewId(str, Enum):
    """Views reachable from the bottom navigation"""
    HOME = "home"
    LEARN = "learn"
    PRACTICE = "practice"
    SEARCH = "search"
    PROFILE = "profile"


@dataclass(frozen=True)
class NavItem:
    id: ViewId
    label: str
    icon: str


NAV_ITEMS: tuple[NavItem, ...] = (
    NavItem(ViewId.HOME, "Home", "home"),
    NavItem(ViewId.LEARN, "Learn", "book-open"),
    NavItem(ViewId.PRACTICE, "Practice", "sparkles"),
    NavItem(ViewId.SEARCH, "Search", "search"),
    NavItem(ViewId.PROFILE, "Profile", "user"),
)

_ALL_VIEWS = frozenset(ViewId)

# Every view can reach every other view through the bottom navigation
VIEW_TRANSITIONS: dict[ViewId, frozenset[ViewId]] = {
    ViewId.HOME: _ALL_VIEWS - {ViewId.HOME},
    ViewId.LEARN: _ALL_VIEWS - {ViewId.LEARN},
    ViewId.PRACTICE: _ALL_VIEWS - {ViewId.PRACTICE},
    ViewId.SEARCH: _ALL_VIEWS - {ViewId.SEARCH},
    ViewId.PROFILE: _ALL_VIEWS - {ViewId.PROFILE},
}

# Views that offer the dictionary overlay
DICTIONARY_HOSTS = frozenset({ViewId.HOME})


class ViewController:
    """Active view, dictionary overlay and the shared learner state"""

    def __init__(
        self,
        progress: ProgressStore,
        gateway: ContentGateway,
        cache: DailyCache,
        settings: Settings | None = None,
        rng: Optional[random.Random] = None
    ):
        self.settings = settings or get_settings()
        self.progress = progress
        self.gateway = gateway

        self.active_view = ViewId.HOME
        self.dictionary_open = False

        self.views: dict[ViewId, BaseView] = {
            ViewId.HOME: HomeView(progress, gateway, cache, self.settings),
            ViewId.LEARN: LearnView(progress, gateway, self.settings),
            ViewId.PRACTICE: PracticeView(progress, gateway, self.settings, rng=rng),
            ViewId.SEARCH: ReverseDictionaryView(progress, gateway, self.settings),
            ViewId.PROFILE: ProfileView(progress, gateway, self.settings),
        }
        self.dictionary = DictionaryView(progress, gateway, self.settings)

    @classmethod
    def create(cls, settings: Settings | None = None) -> "ViewController":
        """Controller with the packaged catalog, seeded progress and configured gateway."""
        settings = settings or get_settings()
        return cls(
            progress=ProgressStore.seeded(get_word_catalog()),
            gateway=create_content_gateway(settings),
            cache=DailyCache.from_settings(settings),
            settings=settings
        )

    # ==================== VIEWS ====================

    @property
    def home(self) -> HomeView:
        return self.views[ViewId.HOME]

    @property
    def learn(self) -> LearnView:
        return self.views[ViewId.LEARN]

    @property
    def practice(self) -> PracticeView:
        return self.views[ViewId.PRACTICE]

    @property
    def search(self) -> ReverseDictionaryView:
        return self.views[ViewId.SEARCH]

    @property
    def profile(self) -> ProfileView:
        return self.views[ViewId.PROFILE]

    @property
    def current_view(self) -> BaseView:
        return self.views[self.active_view]

    # ==================== NAVIGATION ====================

    def can_navigate(self, target: ViewId) -> bool:
        return target in VIEW_TRANSITIONS[self.active_view]

    def navigate(self, target: ViewId) -> ViewId:
        """
        Switch to another view.

        Navigating to the active view does nothing. Any open dictionary
        overlay is closed first.

        Raises:
            InvalidTransitionError: if the transition table forbids it
        """
        if target == self.active_view:
            return self.active_view
        if not self.can_navigate(target):
            raise InvalidTransitionError(
                f"Cannot navigate from {self.active_view.value} to {target.value}"
            )

        if self.dictionary_open:
            self.close_dictionary()
        self.current_view.on_leave()
        logger.info(f"Navigate: {self.active_view.value} -> {target.value}")
        self.active_view = target
        return self.active_view

    def require_active(self, view_id: ViewId) -> BaseView:
        """
        Raises:
            InvalidTransitionError: if view_id is not the active view
        """
        if view_id != self.active_view:
            raise InvalidTransitionError(
                f"{view_id.value} is not the active view ({self.active_view.value})"
            )
        return self.views[view_id]

    def open_dictionary(self) -> None:
        """
        Raises:
            InvalidTransitionError: if the active view has no dictionary entry point
        """
        if self.active_view not in DICTIONARY_HOSTS:
            raise InvalidTransitionError(
                f"Dictionary cannot be opened from {self.active_view.value}"
            )
        self.dictionary_open = True

    def close_dictionary(self) -> None:
        if self.dictionary_open:
            self.dictionary.on_leave()
            self.dictionary_open = False

    def navigation_state(self) -> NavigationResponse:
        return NavigationResponse(
            active_view=self.active_view.value,
            dictionary_open=self.dictionary_open,
            items=[
                NavItemResponse(
                    id=item.id.value,
                    label=item.label,
                    icon=item.icon,
                    active=item.id == self.active_view
                )
                for item in NAV_ITEMS
            ]
        )


# Singleton instance
view_controller = ViewController.create()
