"""Benchmark definitions shipped with perfgate.

Fixed, versioned data. Collections are keyed by their short name; agent
targets reference collections by key.
"""

from __future__ import annotations

from typing import Any

CATALOG_VERSION = "1.0.0"

_MS = "ms"
_MB = "MB"

# Each row: id, name, description, category, target, unit, method, thresholds.
RESPONSE_TIME: list[dict[str, Any]] = [
    {
        "id": "agent_response_time",
        "name": "Agent Response Time",
        "description": "Time for an agent to respond to a message",
        "category": "response_time",
        "target": 500, "unit": _MS, "warning_threshold": 600, "critical_threshold": 1000,
        "measurement_method": "p95",
    },
    {
        "id": "handoff_latency",
        "name": "Handoff Latency",
        "description": "Time for a handoff to complete between agents",
        "category": "response_time",
        "target": 200, "unit": _MS, "warning_threshold": 250, "critical_threshold": 500,
        "measurement_method": "p95",
    },
    {
        "id": "context_sync_time",
        "name": "Context Sync Time",
        "description": "Time for context to synchronize across agents",
        "category": "response_time",
        "target": 100, "unit": _MS, "warning_threshold": 120, "critical_threshold": 200,
        "measurement_method": "p95",
    },
    {
        "id": "decision_time",
        "name": "Decision Time",
        "description": "Time for a collaborative decision to be made",
        "category": "response_time",
        "target": 5000, "unit": _MS, "warning_threshold": 7000, "critical_threshold": 10000,
        "measurement_method": "p95",
    },
    {
        "id": "tool_execution_time",
        "name": "Tool Execution Time",
        "description": "Time for a tool to execute",
        "category": "response_time",
        "target": 1000, "unit": _MS, "warning_threshold": 1200, "critical_threshold": 2000,
        "measurement_method": "p95",
    },
    {
        "id": "conflict_resolution_time",
        "name": "Conflict Resolution Time",
        "description": "Time for a conflict to be resolved",
        "category": "response_time",
        "target": 3000, "unit": _MS, "warning_threshold": 4000, "critical_threshold": 6000,
        "measurement_method": "p95",
    },
    {
        "id": "context7_query_time",
        "name": "Context7 Query Time",
        "description": "Time for a Context7 query to complete",
        "category": "response_time",
        "target": 300, "unit": _MS, "warning_threshold": 400, "critical_threshold": 600,
        "measurement_method": "p95",
    },
]

# Throughput rows are higher-is-better, so their thresholds sit below target.
THROUGHPUT: list[dict[str, Any]] = [
    {
        "id": "messages_per_second",
        "name": "Messages Per Second",
        "description": "Number of messages processed per second",
        "category": "throughput",
        "target": 100, "unit": "msg/s", "threshold": 80,
        "warning_threshold": 90, "critical_threshold": 70,
        "measurement_method": "avg",
    },
    {
        "id": "handoffs_per_second",
        "name": "Handoffs Per Second",
        "description": "Number of handoffs completed per second",
        "category": "throughput",
        "target": 50, "unit": "handoffs/s", "threshold": 40,
        "warning_threshold": 45, "critical_threshold": 35,
        "measurement_method": "avg",
    },
    {
        "id": "context_updates_per_second",
        "name": "Context Updates Per Second",
        "description": "Number of context updates processed per second",
        "category": "throughput",
        "target": 200, "unit": "updates/s", "threshold": 160,
        "warning_threshold": 180, "critical_threshold": 140,
        "measurement_method": "avg",
    },
    {
        "id": "tool_calls_per_second",
        "name": "Tool Calls Per Second",
        "description": "Number of tool calls processed per second",
        "category": "throughput",
        "target": 75, "unit": "calls/s", "threshold": 60,
        "warning_threshold": 67, "critical_threshold": 52,
        "measurement_method": "avg",
    },
]

MEMORY: list[dict[str, Any]] = [
    {
        "id": "agent_memory_usage",
        "name": "Agent Memory Usage",
        "description": "Memory used by each agent",
        "category": "memory",
        "target": 100, "unit": _MB, "warning_threshold": 150, "critical_threshold": 200,
        "measurement_method": "max",
    },
    {
        "id": "context_memory_usage",
        "name": "Context Memory Usage",
        "description": "Memory used for context storage",
        "category": "memory",
        "target": 50, "unit": _MB, "warning_threshold": 75, "critical_threshold": 100,
        "measurement_method": "max",
    },
    {
        "id": "message_queue_memory",
        "name": "Message Queue Memory",
        "description": "Memory used for message queues",
        "category": "memory",
        "target": 20, "unit": _MB, "warning_threshold": 30, "critical_threshold": 50,
        "measurement_method": "max",
    },
    {
        "id": "total_memory_usage",
        "name": "Total System Memory",
        "description": "Total memory used by the agent system",
        "category": "memory",
        "target": 500, "unit": _MB, "warning_threshold": 750, "critical_threshold": 1000,
        "measurement_method": "max",
    },
    {
        "id": "memory_leak_detection",
        "name": "Memory Leak Detection",
        "description": "Memory growth over time (should be minimal)",
        "category": "memory",
        "target": 5, "unit": "MB/hour", "warning_threshold": 10, "critical_threshold": 20,
        "measurement_method": "avg",
    },
]

CPU: list[dict[str, Any]] = [
    {
        "id": "agent_cpu_usage",
        "name": "Agent CPU Usage",
        "description": "CPU usage per agent",
        "category": "cpu",
        "target": 20, "unit": "%", "warning_threshold": 30, "critical_threshold": 50,
        "measurement_method": "avg",
    },
    {
        "id": "total_cpu_usage",
        "name": "Total System CPU",
        "description": "Total CPU usage by the agent system",
        "category": "cpu",
        "target": 60, "unit": "%", "warning_threshold": 75, "critical_threshold": 90,
        "measurement_method": "avg",
    },
    {
        "id": "cpu_efficiency",
        "name": "CPU Efficiency",
        "description": "Messages processed per CPU cycle",
        "category": "cpu",
        "target": 1000, "unit": "msg/MHz", "threshold": 800,
        "warning_threshold": 900, "critical_threshold": 700,
        "measurement_method": "avg",
    },
]

NETWORK: list[dict[str, Any]] = [
    {
        "id": "network_latency",
        "name": "Network Latency",
        "description": "Network latency between agents",
        "category": "network",
        "target": 10, "unit": _MS, "warning_threshold": 20, "critical_threshold": 50,
        "measurement_method": "p95",
    },
    {
        "id": "bandwidth_usage",
        "name": "Bandwidth Usage",
        "description": "Network bandwidth used",
        "category": "network",
        "target": 10, "unit": "MB/s", "warning_threshold": 15, "critical_threshold": 20,
        "measurement_method": "max",
    },
    {
        "id": "message_size",
        "name": "Message Size",
        "description": "Average size of messages",
        "category": "network",
        "target": 10, "unit": "KB", "warning_threshold": 15, "critical_threshold": 25,
        "measurement_method": "avg",
    },
]

ORCHESTRATOR: list[dict[str, Any]] = [
    {
        "id": "orchestrator_response_time",
        "name": "Orchestrator Response Time",
        "description": "Time for orchestrator to respond to requests",
        "category": "response_time",
        "target": 400, "unit": _MS, "warning_threshold": 500, "critical_threshold": 800,
        "measurement_method": "p95",
    },
    {
        "id": "task_delegation_time",
        "name": "Task Delegation Time",
        "description": "Time for orchestrator to delegate tasks",
        "category": "response_time",
        "target": 150, "unit": _MS, "warning_threshold": 200, "critical_threshold": 300,
        "measurement_method": "p95",
    },
    {
        "id": "coordination_overhead",
        "name": "Coordination Overhead",
        "description": "Time spent coordinating agents",
        "category": "response_time",
        "target": 100, "unit": _MS, "warning_threshold": 150, "critical_threshold": 200,
        "measurement_method": "p95",
    },
    {
        "id": "orchestrator_memory",
        "name": "Orchestrator Memory Usage",
        "description": "Memory used by orchestrator",
        "category": "memory",
        "target": 80, "unit": _MB, "warning_threshold": 120, "critical_threshold": 160,
        "measurement_method": "max",
    },
]

SPECIALISTS: list[dict[str, Any]] = [
    {
        "id": "specialist_response_time",
        "name": "Specialist Response Time",
        "description": "Time for specialist agents to respond",
        "category": "response_time",
        "target": 450, "unit": _MS, "warning_threshold": 550, "critical_threshold": 900,
        "measurement_method": "p95",
    },
    {
        "id": "specialist_memory",
        "name": "Specialist Memory Usage",
        "description": "Memory used by each specialist agent",
        "category": "memory",
        "target": 50, "unit": _MB, "warning_threshold": 75, "critical_threshold": 100,
        "measurement_method": "max",
    },
    {
        "id": "specialist_throughput",
        "name": "Specialist Throughput",
        "description": "Messages processed per specialist",
        "category": "throughput",
        "target": 15, "unit": "msg/s", "threshold": 12,
        "warning_threshold": 13, "critical_threshold": 10,
        "measurement_method": "avg",
    },
]

LOAD_TESTING: list[dict[str, Any]] = [
    {
        "id": "concurrent_agent_load",
        "name": "Concurrent Agent Load",
        "description": "Performance with all 11 agents active",
        "category": "throughput",
        "target": 80, "unit": "% throughput", "threshold": 70,
        "warning_threshold": 75, "critical_threshold": 65,
        "measurement_method": "avg",
    },
    {
        "id": "sustained_load",
        "name": "Sustained Load",
        "description": "Performance over 1 hour of sustained load",
        "category": "throughput",
        "target": 90, "unit": "% throughput", "threshold": 80,
        "warning_threshold": 85, "critical_threshold": 75,
        "measurement_method": "avg",
    },
    {
        "id": "peak_load",
        "name": "Peak Load",
        "description": "Performance during peak traffic (2x normal)",
        "category": "throughput",
        "target": 70, "unit": "% throughput", "threshold": 60,
        "warning_threshold": 65, "critical_threshold": 55,
        "measurement_method": "avg",
    },
    {
        "id": "spike_handling",
        "name": "Spike Handling",
        "description": "Performance during sudden traffic spike (5x normal)",
        "category": "response_time",
        "target": 1000, "unit": _MS, "warning_threshold": 1500, "critical_threshold": 2000,
        "measurement_method": "p95",
    },
]

INTEGRATION: list[dict[str, Any]] = [
    {
        "id": "context7_integration",
        "name": "Context7 Integration",
        "description": "Time to interact with Context7",
        "category": "response_time",
        "target": 350, "unit": _MS, "warning_threshold": 450, "critical_threshold": 600,
        "measurement_method": "p95",
    },
    {
        "id": "monitoring_integration",
        "name": "Monitoring Integration",
        "description": "Time to report metrics to monitoring",
        "category": "response_time",
        "target": 100, "unit": _MS, "warning_threshold": 150, "critical_threshold": 200,
        "measurement_method": "p95",
    },
    {
        "id": "ci_cd_integration",
        "name": "CI/CD Integration",
        "description": "Time to run in CI/CD pipeline",
        "category": "response_time",
        "target": 120000, "unit": _MS, "warning_threshold": 150000, "critical_threshold": 180000,
        "measurement_method": "p95",
    },
]

# key -> (suite id, suite name, description, rows)
COLLECTIONS: dict[str, tuple[str, str, str, list[dict[str, Any]]]] = {
    "response_time": (
        "response_time_benchmarks",
        "Response Time Benchmarks",
        "Benchmarks measuring response times across the system",
        RESPONSE_TIME,
    ),
    "throughput": (
        "throughput_benchmarks",
        "Throughput Benchmarks",
        "Benchmarks measuring system throughput",
        THROUGHPUT,
    ),
    "memory": (
        "memory_benchmarks",
        "Memory Benchmarks",
        "Benchmarks measuring memory usage",
        MEMORY,
    ),
    "cpu": ("cpu_benchmarks", "CPU Benchmarks", "Benchmarks measuring CPU usage", CPU),
    "network": (
        "network_benchmarks",
        "Network Benchmarks",
        "Benchmarks measuring network performance",
        NETWORK,
    ),
    "orchestrator": (
        "orchestrator_benchmarks",
        "Orchestrator Benchmarks",
        "Performance benchmarks for the Frontend Design Orchestrator",
        ORCHESTRATOR,
    ),
    "specialists": (
        "specialist_benchmarks",
        "Specialist Agent Benchmarks",
        "Performance benchmarks for all specialist agents",
        SPECIALISTS,
    ),
    "load_testing": (
        "load_testing_benchmarks",
        "Load Testing Benchmarks",
        "Benchmarks for testing system under load",
        LOAD_TESTING,
    ),
    "integration": (
        "integration_benchmarks",
        "Integration Benchmarks",
        "Benchmarks for integration with external services",
        INTEGRATION,
    ),
}

# agent id -> (display name, collection keys)
AGENT_TARGETS: dict[str, tuple[str, tuple[str, ...]]] = {
    "orchestrator": ("Frontend Design Orchestrator", ("orchestrator",)),
    "design_system": ("Design System Specialist", ("specialists",)),
    "component_developer": ("Component Developer", ("specialists",)),
    "performance_optimizer": ("Performance Optimizer", ("specialists",)),
    "accessibility": ("Accessibility Specialist", ("specialists",)),
    "cross_platform": ("Cross-Platform Specialist", ("specialists",)),
    "testing_qa": ("Testing & QA Specialist", ("specialists",)),
    "security": ("Security Specialist", ("specialists",)),
    "animation": ("Animation Specialist", ("specialists",)),
    "i18n": ("I18n Specialist", ("specialists",)),
    "ux_research": ("UX Research Specialist", ("specialists",)),
}
