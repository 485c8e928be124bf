# -*- coding: utf-8 -*-
"""Message catalogue for the CLI (en_US, de_DE, zh_CN)."""

from __future__ import annotations

import os
from typing import Dict, List, Mapping, Optional

from .constant import DEFAULT_LANG

FALLBACK_LOCALE = DEFAULT_LANG

MESSAGES: Dict[str, Dict[str, str]] = {
    "en_US": {
        "cli.error_general": "Error",
        "wizard.welcome": "Welcome to ccswitch!",
        "wizard.privacy_note": (
            "Your API key is stored locally and only sent to the "
            "provider you choose."
        ),
        "wizard.select_language": "Select language",
        "wizard.select_provider": "Select provider",
        "wizard.select_region": "Select region",
        "wizard.select_model": "Select model",
        "wizard.provider_single_region": "Only one region available",
        "wizard.provider_saved": (
            "Provider set: {provider} / {region} / {model}"
        ),
        "wizard.api_key_get_hint": "Get your API key at: {url}",
        "wizard.input_your_api_key": "Enter your API key",
        "wizard.api_key_required": "An API key is required.",
        "wizard.validating_api_key": "Validating API key...",
        "wizard.api_key_invalid": "API key is invalid or expired.",
        "wizard.api_key_network_error": (
            "Could not verify the API key ({message}); saved anyway."
        ),
        "wizard.set_success": "API key saved.",
        "wizard.api_key_revoked": "API key revoked.",
        "wizard.missing_config": (
            "Please select a provider and set an API key first."
        ),
        "wizard.applying_config": "Applying configuration...",
        "wizard.config_applied": "Configuration applied to Claude Code.",
        "wizard.config_apply_failed": "Failed to apply configuration.",
        "wizard.backup_saved": "Previous settings backed up to {path}",
        "wizard.confirm_remove": (
            "Remove the provider configuration from Claude Code?"
        ),
        "wizard.config_removed": "Configuration removed from Claude Code.",
        "wizard.nothing_to_remove": "Nothing to remove.",
        "wizard.config_remove_failed": "Failed to remove configuration.",
        "wizard.thinking": "thinking",
        "wizard.recommended": "recommended",
        "status.local_title": "Local Config",
        "status.claude_title": "Claude Code",
        "status.provider": "Provider",
        "status.region": "Region",
        "status.model": "Model",
        "status.api_key": "API Key",
        "status.base_url": "Base URL",
        "status.not_set": "Not set",
        "status.not_configured": "Not configured",
        "status.unknown_provider": "Unknown provider",
        "status.default_model": "default",
        "doctor.title": "Health Check",
        "doctor.python_version": "Python version",
        "doctor.claude_installed": "Claude Code installed",
        "doctor.config_exists": "Local config exists",
        "doctor.provider_configured": "Provider configured",
        "doctor.api_key_set": "API key set",
        "doctor.api_key_valid": "API key valid",
        "doctor.all_good": "Everything looks good!",
        "doctor.issues_found": "Some checks failed.",
        "backup.none": "No backups found.",
        "backup.count": "{count} backup(s):",
        "backup.created": "Backup created: {path}",
        "backup.select": "Select a backup to restore",
        "backup.restored": "Settings restored from {path}",
        "backup.restore_failed": "Failed to restore backup.",
        "lang.set": "Language set to: {locale}",
        "lang.unknown": "Unknown locale: {locale}",
        "lang.current": "Current: {locale}",
        "lang.available": "Available: {locales}",
        "errors.unknown_provider": "Unknown provider: {provider}",
        "errors.unknown_region": "Unknown region: {region}",
        "errors.unknown_model": "Unknown model: {model}",
        "menu.title": "ccswitch - Claude Code provider switcher",
        "menu.claude_active": "Active ({provider})",
        "menu.select_operation": "What would you like to do?",
        "menu.language": "Configure language",
        "menu.provider": "Select provider",
        "menu.api_key": "Configure API key",
        "menu.apply": "Apply to Claude Code",
        "menu.unload": "Remove from Claude Code",
        "menu.backup_restore": "Restore a backup",
        "menu.status": "Show status",
        "menu.exit": "Exit",
        "menu.goodbye": "Goodbye!",
    },
    "de_DE": {
        "cli.error_general": "Fehler",
        "wizard.welcome": "Willkommen bei ccswitch!",
        "wizard.privacy_note": (
            "Dein API-Schlüssel wird lokal gespeichert und nur an den "
            "gewählten Anbieter gesendet."
        ),
        "wizard.select_language": "Sprache wählen",
        "wizard.select_provider": "Anbieter wählen",
        "wizard.select_region": "Region wählen",
        "wizard.select_model": "Modell wählen",
        "wizard.provider_single_region": "Nur eine Region verfügbar",
        "wizard.provider_saved": (
            "Anbieter gesetzt: {provider} / {region} / {model}"
        ),
        "wizard.api_key_get_hint": "API-Schlüssel erhältst du hier: {url}",
        "wizard.input_your_api_key": "API-Schlüssel eingeben",
        "wizard.api_key_required": "Ein API-Schlüssel ist erforderlich.",
        "wizard.validating_api_key": "API-Schlüssel wird geprüft...",
        "wizard.api_key_invalid": (
            "API-Schlüssel ist ungültig oder abgelaufen."
        ),
        "wizard.api_key_network_error": (
            "API-Schlüssel konnte nicht geprüft werden ({message}); "
            "trotzdem gespeichert."
        ),
        "wizard.set_success": "API-Schlüssel gespeichert.",
        "wizard.api_key_revoked": "API-Schlüssel entfernt.",
        "wizard.missing_config": (
            "Bitte zuerst Anbieter wählen und API-Schlüssel setzen."
        ),
        "wizard.applying_config": "Konfiguration wird angewendet...",
        "wizard.config_applied": (
            "Konfiguration auf Claude Code angewendet."
        ),
        "wizard.config_apply_failed": (
            "Konfiguration konnte nicht angewendet werden."
        ),
        "wizard.backup_saved": (
            "Vorherige Einstellungen gesichert unter {path}"
        ),
        "wizard.confirm_remove": (
            "Anbieter-Konfiguration aus Claude Code entfernen?"
        ),
        "wizard.config_removed": "Konfiguration aus Claude Code entfernt.",
        "wizard.nothing_to_remove": "Nichts zu entfernen.",
        "wizard.config_remove_failed": (
            "Konfiguration konnte nicht entfernt werden."
        ),
        "wizard.thinking": "Denkmodus",
        "wizard.recommended": "empfohlen",
        "status.local_title": "Lokale Konfiguration",
        "status.claude_title": "Claude Code",
        "status.provider": "Anbieter",
        "status.region": "Region",
        "status.model": "Modell",
        "status.api_key": "API-Schlüssel",
        "status.base_url": "Basis-URL",
        "status.not_set": "Nicht gesetzt",
        "status.not_configured": "Nicht konfiguriert",
        "status.unknown_provider": "Unbekannter Anbieter",
        "status.default_model": "Standard",
        "doctor.title": "Systemprüfung",
        "doctor.python_version": "Python-Version",
        "doctor.claude_installed": "Claude Code installiert",
        "doctor.config_exists": "Lokale Konfiguration vorhanden",
        "doctor.provider_configured": "Anbieter konfiguriert",
        "doctor.api_key_set": "API-Schlüssel gesetzt",
        "doctor.api_key_valid": "API-Schlüssel gültig",
        "doctor.all_good": "Alles in Ordnung!",
        "doctor.issues_found": "Einige Prüfungen sind fehlgeschlagen.",
        "backup.none": "Keine Sicherungen gefunden.",
        "backup.count": "{count} Sicherung(en):",
        "backup.created": "Sicherung erstellt: {path}",
        "backup.select": "Sicherung zum Wiederherstellen wählen",
        "backup.restored": "Einstellungen wiederhergestellt aus {path}",
        "backup.restore_failed": (
            "Sicherung konnte nicht wiederhergestellt werden."
        ),
        "lang.set": "Sprache gesetzt: {locale}",
        "lang.unknown": "Unbekannte Sprache: {locale}",
        "lang.current": "Aktuell: {locale}",
        "lang.available": "Verfügbar: {locales}",
        "errors.unknown_provider": "Unbekannter Anbieter: {provider}",
        "errors.unknown_region": "Unbekannte Region: {region}",
        "errors.unknown_model": "Unbekanntes Modell: {model}",
        "menu.title": "ccswitch - Anbieterwechsel für Claude Code",
        "menu.claude_active": "Aktiv ({provider})",
        "menu.select_operation": "Was möchtest du tun?",
        "menu.language": "Sprache einstellen",
        "menu.provider": "Anbieter wählen",
        "menu.api_key": "API-Schlüssel einrichten",
        "menu.apply": "Auf Claude Code anwenden",
        "menu.unload": "Aus Claude Code entfernen",
        "menu.backup_restore": "Sicherung wiederherstellen",
        "menu.status": "Status anzeigen",
        "menu.exit": "Beenden",
        "menu.goodbye": "Auf Wiedersehen!",
    },
    "zh_CN": {
        "cli.error_general": "错误",
        "wizard.welcome": "欢迎使用 ccswitch！",
        "wizard.privacy_note": (
            "API 密钥仅保存在本地，只会发送给你选择的服务商。"
        ),
        "wizard.select_language": "选择语言",
        "wizard.select_provider": "选择服务商",
        "wizard.select_region": "选择区域",
        "wizard.select_model": "选择模型",
        "wizard.provider_single_region": "仅有一个可用区域",
        "wizard.provider_saved": (
            "已设置服务商：{provider} / {region} / {model}"
        ),
        "wizard.api_key_get_hint": "在此获取 API 密钥：{url}",
        "wizard.input_your_api_key": "请输入 API 密钥",
        "wizard.api_key_required": "API 密钥不能为空。",
        "wizard.validating_api_key": "正在验证 API 密钥...",
        "wizard.api_key_invalid": "API 密钥无效或已过期。",
        "wizard.api_key_network_error": (
            "无法验证 API 密钥（{message}），已直接保存。"
        ),
        "wizard.set_success": "API 密钥已保存。",
        "wizard.api_key_revoked": "API 密钥已移除。",
        "wizard.missing_config": (
            "请先选择服务商并设置 API 密钥。"
        ),
        "wizard.applying_config": "正在应用配置...",
        "wizard.config_applied": "配置已应用到 Claude Code。",
        "wizard.config_apply_failed": "应用配置失败。",
        "wizard.backup_saved": "原设置已备份到 {path}",
        "wizard.confirm_remove": (
            "确定从 Claude Code 中移除服务商配置？"
        ),
        "wizard.config_removed": "已从 Claude Code 中移除配置。",
        "wizard.nothing_to_remove": "没有需要移除的配置。",
        "wizard.config_remove_failed": "移除配置失败。",
        "wizard.thinking": "思考",
        "wizard.recommended": "推荐",
        "status.local_title": "本地配置",
        "status.claude_title": "Claude Code",
        "status.provider": "服务商",
        "status.region": "区域",
        "status.model": "模型",
        "status.api_key": "API 密钥",
        "status.base_url": "Base URL",
        "status.not_set": "未设置",
        "status.not_configured": "未配置",
        "status.unknown_provider": "未知服务商",
        "status.default_model": "默认",
        "doctor.title": "健康检查",
        "doctor.python_version": "Python 版本",
        "doctor.claude_installed": "已安装 Claude Code",
        "doctor.config_exists": "本地配置存在",
        "doctor.provider_configured": "已配置服务商",
        "doctor.api_key_set": "已设置 API 密钥",
        "doctor.api_key_valid": "API 密钥有效",
        "doctor.all_good": "一切正常！",
        "doctor.issues_found": "部分检查未通过。",
        "backup.none": "没有找到备份。",
        "backup.count": "共 {count} 个备份：",
        "backup.created": "已创建备份：{path}",
        "backup.select": "选择要恢复的备份",
        "backup.restored": "已从 {path} 恢复设置",
        "backup.restore_failed": "恢复备份失败。",
        "lang.set": "语言已设置为：{locale}",
        "lang.unknown": "未知语言：{locale}",
        "lang.current": "当前：{locale}",
        "lang.available": "可用：{locales}",
        "errors.unknown_provider": "未知服务商：{provider}",
        "errors.unknown_region": "未知区域：{region}",
        "errors.unknown_model": "未知模型：{model}",
        "menu.title": "ccswitch - Claude Code 服务商切换工具",
        "menu.claude_active": "已启用（{provider}）",
        "menu.select_operation": "请选择操作",
        "menu.language": "设置语言",
        "menu.provider": "选择服务商",
        "menu.api_key": "设置 API 密钥",
        "menu.apply": "应用到 Claude Code",
        "menu.unload": "从 Claude Code 移除",
        "menu.backup_restore": "恢复备份",
        "menu.status": "查看状态",
        "menu.exit": "退出",
        "menu.goodbye": "再见！",
    },
}

LANGUAGE_NAMES: Dict[str, str] = {
    "en_US": "[EN] English",
    "de_DE": "[DE] Deutsch",
    "zh_CN": "[CN] 中文",
}


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def available_locales() -> List[str]:
    return list(MESSAGES)


def detect_locale(environ: Optional[Mapping[str, str]] = None) -> str:
    """Pick a locale from ``LANG`` / ``LC_ALL`` (``de_DE.UTF-8`` → de_DE)."""
    if environ is None:
        environ = os.environ
    raw = environ.get("LANG") or environ.get("LC_ALL") or ""
    code = raw.split(".")[0]
    if code in MESSAGES:
        return code
    lang = code.split("_")[0]
    if lang == "de":
        return "de_DE"
    if lang == "zh":
        return "zh_CN"
    return FALLBACK_LOCALE


class Translator:
    """Looks up messages for the current locale, falling back to English."""

    def __init__(self, locale: str = FALLBACK_LOCALE):
        self.locale = locale if locale in MESSAGES else FALLBACK_LOCALE

    def set_locale(self, locale: str) -> bool:
        """Switch locale; unknown locales are ignored (returns False)."""
        if locale not in MESSAGES:
            return False
        self.locale = locale
        return True

    def t(self, key: str, **params: object) -> str:
        text = MESSAGES[self.locale].get(key)
        if text is None:
            text = MESSAGES[FALLBACK_LOCALE].get(key, key)
        if not params:
            return text
        return text.format_map(
            _KeepMissing({k: str(v) for k, v in params.items()}),
        )
