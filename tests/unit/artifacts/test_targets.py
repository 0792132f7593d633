"""Tests for target directory layouts."""

from agent_share.artifacts.targets import TARGETS, Target, get_target_config


def test_builtin_targets() -> None:
    assert TARGETS[".claude"].subdir("skills") == ".claude/skills"
    assert TARGETS[".cursor"].subdir("rules") == ".cursor/rules"


def test_shared_agents_live_at_root_of_dot_agents() -> None:
    """The shared target keeps agent files directly in .agents/."""
    assert TARGETS[".agents"].subdir("agents") == ".agents"
    assert TARGETS[".agents"].subdir("commands") == ".agents/commands"


def test_custom_key_gets_default_layout() -> None:
    config = get_target_config("./my-config")

    assert config.name == "./my-config"
    assert config.subdir("skills") == "./my-config/skills"
    assert config.subdir("agents") == "./my-config/agents"
    assert config.settings == "./my-config"


def test_target_display_name() -> None:
    assert Target.from_key(".claude").display_name == "Claude Code"
    assert Target.from_key("vendor/tools").display_name == "vendor/tools"
