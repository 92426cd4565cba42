from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def plugin_project(project_builder: ProjectBuilder) -> ProjectBuilder:
    """The sample plugin layout used across integration tests."""
    project_builder.write(
        {
            "plugin.php": """
                <?php
                /**
                 * Plugin Name: Test Plugin
                 * Description: A test WordPress plugin
                 */

                // Include main functionality
                require_once 'includes/functions.php';
                require_once 'includes/admin.php';

                function test_plugin_enqueue_scripts() {
                    wp_enqueue_script('test-plugin-main', 'assets/js/main.js', array('jquery'), '1.0.0', true);
                    wp_enqueue_style('test-plugin-styles', 'assets/css/style.css', array(), '1.0.0');
                }

                // This file includes another file in comments
                // require_once 'includes/disabled.php';
            """,
            "includes/functions.php": "<?php\nfunction helper() { return 1; }\n",
            "includes/admin.php": "<?php\nfunction admin_page() {}\n",
            "includes/disabled.php": "<?php\n// nothing here\n",
            "includes/orphan.php": "<?php\necho 'unused';\n",
            "assets/js/main.js": "console.log('main');\n",
            "assets/js/legacy.js": "console.log('legacy');\n",
            "assets/css/style.css": "body { color: red; }\n",
            "README.md": "# not analysed\n",
        }
    )
    return project_builder
