"""
Practice API Endpoints
Practice menu, vocabulary quiz and synonym swipe game.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from wordwise.core.dependencies import require_active_view
from wordwise.core.errors import InvalidTransitionError, SessionNotFoundError
from wordwise.schemas.practice import (
    PracticeResponse,
    QuizAnswerRequest,
    QuizStateResponse,
    SwipeAnswerRequest,
    SwipeStateResponse
)
from wordwise.views.controller import ViewController, ViewId


logger = logging.getLogger(__name__)

router = APIRouter()

active_controller = require_active_view(ViewId.PRACTICE)


def _game_error(e: Exception) -> HTTPException:
    """Map a game error to the HTTP status it is reported with."""
    if isinstance(e, SessionNotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, InvalidTransitionError):
        return HTTPException(status_code=409, detail=str(e))
    logger.error(f"Practice error: {e}")
    return HTTPException(status_code=500, detail=f"Practice request failed: {str(e)}")


# ==================== MENU ====================

@router.get("", response_model=PracticeResponse)
async def get_practice(controller: ViewController = Depends(active_controller)):
    """Practice mode, the activity menu and the running game, if any."""
    return await controller.practice.render()


@router.post("/menu", response_model=PracticeResponse)
async def back_to_menu(controller: ViewController = Depends(active_controller)):
    """Close the running game and return to the activity menu."""
    controller.practice.back_to_menu()
    return await controller.practice.render()


# ==================== QUIZ ====================

@router.post("/quiz", response_model=QuizStateResponse)
async def start_quiz(controller: ViewController = Depends(active_controller)):
    """
    Start a new vocabulary quiz.

    Replaces any running game. Questions are generated for randomly
    sampled catalog words before the first question is returned.
    """
    try:
        return await controller.practice.start_quiz()
    except Exception as e:
        raise _game_error(e)


@router.get("/quiz", response_model=QuizStateResponse)
async def get_quiz(controller: ViewController = Depends(active_controller)):
    """Current quiz state."""
    try:
        return controller.practice.quiz_state()
    except Exception as e:
        raise _game_error(e)


@router.post("/quiz/answer", response_model=QuizStateResponse)
async def answer_quiz(
    request: QuizAnswerRequest,
    controller: ViewController = Depends(active_controller)
):
    """
    Answer the current question.

    The answer is recorded in the learner's accuracy; a correct answer
    also marks the word as learned.
    """
    try:
        return controller.practice.answer_quiz(request.option)
    except Exception as e:
        raise _game_error(e)


@router.post("/quiz/next", response_model=QuizStateResponse)
async def next_quiz_question(controller: ViewController = Depends(active_controller)):
    """Move to the next question or to the results."""
    try:
        return controller.practice.next_quiz_question()
    except Exception as e:
        raise _game_error(e)


# ==================== SWIPE ====================

@router.post("/swipe", response_model=SwipeStateResponse)
async def start_swipe(controller: ViewController = Depends(active_controller)):
    """Start a new synonym swipe game. Replaces any running game."""
    try:
        return await controller.practice.start_swipe()
    except Exception as e:
        raise _game_error(e)


@router.get("/swipe", response_model=SwipeStateResponse)
async def get_swipe(controller: ViewController = Depends(active_controller)):
    """Current swipe game state."""
    try:
        return controller.practice.swipe_state()
    except Exception as e:
        raise _game_error(e)


@router.post("/swipe/answer", response_model=SwipeStateResponse)
async def answer_swipe(
    request: SwipeAnswerRequest,
    controller: ViewController = Depends(active_controller)
):
    """Swipe the current pair as synonyms or not."""
    try:
        return controller.practice.answer_swipe(request.is_synonym)
    except Exception as e:
        raise _game_error(e)


@router.post("/swipe/next", response_model=SwipeStateResponse)
async def next_swipe_round(controller: ViewController = Depends(active_controller)):
    """Leave the feedback screen and load the next pair or the results."""
    try:
        return await controller.practice.next_swipe_round()
    except Exception as e:
        raise _game_error(e)
