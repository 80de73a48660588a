from config import Config as LambdaConfig
from ecs_task_dns.config import Config as StackConfig


def test_lambda_config_defaults():
    config = LambdaConfig()
    assert config.domain_tag_key == "domain"
    assert config.hosted_zone_tag_key == "hostedZoneId"
    assert config.dns_record_ttl == 180
    assert config.log_level == "INFO"


def test_lambda_config_from_environment(monkeypatch):
    monkeypatch.setenv("DOMAIN_TAG_KEY", "dns-name")
    monkeypatch.setenv("HOSTED_ZONE_TAG_KEY", "dns-zone")
    monkeypatch.setenv("DNS_RECORD_TTL", "60")
    config = LambdaConfig()
    assert config.domain_tag_key == "dns-name"
    assert config.hosted_zone_tag_key == "dns-zone"
    assert config.dns_record_ttl == 60


def test_lambda_config_bad_ttl_falls_back(monkeypatch):
    monkeypatch.setenv("DNS_RECORD_TTL", "soon")
    assert LambdaConfig().dns_record_ttl == 180
    monkeypatch.setenv("DNS_RECORD_TTL", "-5")
    assert LambdaConfig().dns_record_ttl == 180


def test_stack_config_environment_override(monkeypatch):
    monkeypatch.setenv("ECS_CLUSTER_NAME", "game-cluster")
    config = StackConfig.get_config()
    assert config["ECS_CLUSTER_NAME"] == "game-cluster"
    assert config["TASK_LAST_STATUS"] == "RUNNING"
    assert config["DNS_RECORD_TTL"] == 180
    assert "get_config" not in config


def test_lambda_config_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert LambdaConfig().log_level == "DEBUG"
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert LambdaConfig().log_level == "INFO"
