"""
intake/enums.py — Enumeration registry.

Closed value sets accepted for analysis and vulnerability fields. Values are
compared exactly; nothing is case-folded or coerced.
"""
from enum import Enum
from typing import FrozenSet, Type


class Tool(str, Enum):
    GO_SEC = "GoSec"
    SECURITY_CODE_SCAN = "SecurityCodeScan"
    GIT_LEAKS = "GitLeaks"
    BRAKEMAN = "Brakeman"
    NPM_AUDIT = "NpmAudit"
    SAFETY = "Safety"
    BANDIT = "Bandit"
    YARN_AUDIT = "YarnAudit"
    TF_SEC = "TfSec"
    HORUSEC_ENGINE = "HorusecEngine"
    SEMGREP = "Semgrep"
    FLAWFINDER = "Flawfinder"
    PHP_CS = "PhpCS"
    SHELL_CHECK = "ShellCheck"
    BUNDLER_AUDIT = "BundlerAudit"
    SOBELOW = "Sobelow"
    MIX_AUDIT = "MixAudit"
    OWASP_DEPENDENCY_CHECK = "OwaspDependencyCheck"
    DOTNET_CLI = "DotnetCli"
    NANCY = "Nancy"


class Language(str, Enum):
    GO = "Go"
    CSHARP = "C#"
    DART = "Dart"
    RUBY = "Ruby"
    PYTHON = "Python"
    JAVA = "Java"
    KOTLIN = "Kotlin"
    JAVASCRIPT = "JavaScript"
    LEAKS = "Leaks"
    HCL = "HCL"
    PHP = "PHP"
    TYPESCRIPT = "TypeScript"
    C = "C"
    HTML = "HTML"
    GENERIC = "Generic"
    YAML = "YAML"
    SHELL = "Shell"
    ELIXIR = "Elixir"
    NGINX = "Nginx"
    SWIFT = "Swift"


class Severity(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"
    UNKNOWN = "UNKNOWN"


class Confidence(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class VulnerabilityType(str, Enum):
    """Disposition of a reported vulnerability."""
    VULNERABILITY = "Vulnerability"
    RISK_ACCEPTED = "Risk Accepted"
    FALSE_POSITIVE = "False Positive"
    CORRECTED = "Corrected"


class AnalysisStatus(str, Enum):
    RUNNING = "running"
    SUCCESS = "success"
    ERROR = "error"


def values(enum_cls: Type[Enum]) -> FrozenSet[str]:
    """Return the set of wire values a registry accepts."""
    return frozenset(member.value for member in enum_cls)
