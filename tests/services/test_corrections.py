"""
Тесты для CorrectionService.
"""
import logging
from datetime import datetime, timedelta, timezone

import pytest

from mxbot.domain import CaseInsensitive, CaseSensitive
from mxbot.services import CorrectionService
from mxbot.services.corrections import describe_rule

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def service(make_config, corrections_data, listener_store):
    return CorrectionService(make_config(corrections_data), listener_store)


# ═══════════════════════════════════════════════════════════════════════════════
# RULES
# ═══════════════════════════════════════════════════════════════════════════════

class TestSpellCheckRules:
    """Тесты правил написания."""

    def test_insensitive_ignores_case(self):
        """Тест: регистр не важен."""
        rule = CaseInsensitive("jellyfish")

        assert rule.matches("I use JellyFish at home")
        assert rule.matches("jellyfish!")

    def test_sensitive_exact_case(self):
        """Тест: регистр важен."""
        rule = CaseSensitive("JellyFin")

        assert rule.matches("I use JellyFin")
        assert not rule.matches("I use Jellyfin")

    def test_whole_words_only(self):
        """Тест: подстрока внутри слова не считается."""
        assert not CaseInsensitive("fin").matches("Jellyfin")

    def test_insensitive_equality(self):
        """Тест: регистронезависимые правила равны без учёта регистра."""
        assert CaseInsensitive("Foo") == CaseInsensitive("foo")
        assert hash(CaseInsensitive("Foo")) == hash(CaseInsensitive("foo"))

    def test_sensitive_equality(self):
        """Тест: регистрозависимые правила равны только при точном совпадении."""
        assert CaseSensitive("Foo") != CaseSensitive("foo")
        assert CaseSensitive("Foo") == CaseSensitive("Foo")

    def test_different_kinds_are_not_equal(self):
        """Тест: правила разных видов не равны."""
        assert CaseInsensitive("foo") != CaseSensitive("foo")

    def test_describe_rule(self):
        """Тест: описание правила для логов."""
        assert describe_rule(CaseInsensitive("a")) == "a (case insensitive)"
        assert describe_rule(CaseSensitive("B")) == "B (case sensitive)"


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE
# ═══════════════════════════════════════════════════════════════════════════════

class TestCorrectionService:
    """Тесты check()."""

    def test_insensitive_match(self, service, test_room_id, test_user_id):
        """Тест: текст исправления собирается из отправителя и правила."""
        message = service.check(test_room_id, test_user_id, "I love JELLYFISH", NOW)

        assert message == "@alice:example.org: did you mean Jellyfin instead of jellyfish?"

    def test_sensitive_match(self, service, test_room_id, test_user_id):
        """Тест: срабатывает регистрозависимое правило."""
        message = service.check(test_room_id, test_user_id, "JellyFin is great", NOW)

        assert message == "@alice:example.org: did you mean Jellyfin instead of JellyFin?"

    def test_correct_spelling_is_ignored(self, service, test_room_id, test_user_id):
        """Тест: правильное написание не исправляем."""
        assert service.check(test_room_id, test_user_id, "Jellyfin is great", NOW) is None

    def test_cooldown_suppresses_second_correction(self, service, test_room_id, test_user_id):
        """Тест: второе исправление в течение 300 секунд не выдаётся."""
        assert service.check(test_room_id, test_user_id, "jellyfish", NOW)
        assert service.check(test_room_id, test_user_id, "jellyfish", NOW + timedelta(seconds=299)) is None
        assert service.check(test_room_id, test_user_id, "jellyfish", NOW + timedelta(seconds=300))

    def test_correction_is_recorded(self, service, listener_store, test_room_id, test_user_id):
        """Тест: время исправления записывается в хранилище."""
        service.check(test_room_id, test_user_id, "jellyfish", NOW)

        assert listener_store.state.last_correction_time[test_room_id] == NOW

    def test_no_match_does_not_touch_cooldown(self, service, listener_store, test_room_id, test_user_id):
        """Тест: без совпадения кулдаун не трогаем."""
        service.check(test_room_id, test_user_id, "hello", NOW)

        assert test_room_id not in listener_store.state.last_correction_time

    def test_excluded_room(self, make_config, corrections_data, listener_store, test_room_id, test_user_id):
        """Тест: в исключённой комнате исправлений нет."""
        corrections_data["general"]["correction_exclusion"] = [test_room_id]
        service = CorrectionService(make_config(corrections_data), listener_store)

        assert service.check(test_room_id, test_user_id, "jellyfish", NOW) is None

    def test_disabled(self, make_config, raw_config_data, listener_store, test_room_id, test_user_id):
        """Тест: исправления выключены в конфиге."""
        service = CorrectionService(make_config(raw_config_data), listener_store)

        assert service.check(test_room_id, test_user_id, "jellyfish", NOW) is None

    @pytest.mark.parametrize("template", ["{2}", "{name}"])
    def test_broken_template(
        self, make_config, corrections_data, listener_store, test_room_id, test_user_id, template, caplog
    ):
        """Тест: кривой шаблон - ошибка в логе, кулдаун не трогаем."""
        corrections_data["general"]["correction_text"] = template
        service = CorrectionService(make_config(corrections_data), listener_store)

        with caplog.at_level(logging.ERROR):
            assert service.check(test_room_id, test_user_id, "jellyfish", NOW) is None

        assert "Invalid correction text" in caplog.text
        assert test_room_id not in listener_store.state.last_correction_time
