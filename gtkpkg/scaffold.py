#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# gtkpkg - Build and install GTK applications written in Rust
# Copyright (C) 2025 gtkpkg contributors
#
# This file is part of gtkpkg.
#
# gtkpkg is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# gtkpkg is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with gtkpkg.  If not, see <https://www.gnu.org/licenses/>.


"""Create a new GTK application with cargo new and the files gtkpkg works with.

Everything in data/ is written as a template, the @TOKENS@ in there are filled
during gtkpkg install.
"""

import json
import os
from typing import Dict

from gtkpkg.configs.metadata import MANIFEST_NAME, METADATA_SECTION, NewProject
from gtkpkg.configs.paths import PathUtils
from gtkpkg.data_files import fill_template
from gtkpkg.logging.logger import logger
from gtkpkg.tools import CARGO, Command, ToolRunner

DEPENDENCIES = """gtk = { version = "0.9", package = "gtk4" }
gettext-rs = { version = "0.7", features = ["gettext-system"] }
"""

METADATA = """
[package.metadata.@SECTION@]
id = @APP_ID@
name = @APP_NAME@
"""

MAIN_RS = """use gettextrs::{bind_textdomain_codeset, bindtextdomain, textdomain};
use gtk::prelude::*;
use gtk::{gdk, gio, glib};

// Generated by gtkpkg install
include!(env!("CONFIG_PATH"));

fn main() -> glib::ExitCode {
    bindtextdomain(GETTEXT_PACKAGE, LOCALEDIR).expect("Unable to bind the text domain");
    bind_textdomain_codeset(GETTEXT_PACKAGE, "UTF-8")
        .expect("Unable to set the text domain encoding");
    textdomain(GETTEXT_PACKAGE).expect("Unable to switch to the text domain");

    glib::set_application_name(APP_NAME);

    let resources = gio::Resource::load(format!("{}/{}.gresource", PKGDATADIR, APP_ID))
        .expect("Could not load resources");
    gio::resources_register(&resources);

    let app = gtk::Application::builder().application_id(APP_ID).build();
    app.connect_startup(|_| load_css());
    app.connect_activate(build_ui);
    app.run()
}

fn resource_path(name: &str) -> String {
    format!("/{}/{}", APP_ID.replace('.', "/"), name)
}

fn load_css() {
    let provider = gtk::CssProvider::new();
    provider.load_from_resource(&resource_path("style.css"));
    gtk::style_context_add_provider_for_display(
        &gdk::Display::default().expect("Could not connect to a display"),
        &provider,
        gtk::STYLE_PROVIDER_PRIORITY_APPLICATION,
    );
}

fn build_ui(app: &gtk::Application) {
    let builder = gtk::Builder::from_resource(&resource_path("window.ui"));
    let window: gtk::ApplicationWindow =
        builder.object("window").expect("Could not get the window");
    window.set_title(Some(APP_NAME));
    window.set_application(Some(app));
    if PROFILE == "debug" {
        window.add_css_class("devel");
    }
    window.present();
}
"""

DESKTOP_IN = """[Desktop Entry]
Name=@APP_NAME@
Comment=@APP_NAME@
Type=Application
Exec=@APP_BINARY@
Terminal=false
Categories=GNOME;GTK;
# Translators: Do NOT translate or transliterate this text (this is an icon file name)!
Icon=@APP_ID@
StartupNotify=true
"""

APPDATA_IN = """<?xml version="1.0" encoding="UTF-8"?>
<component type="desktop-application">
  <id>@APP_ID@</id>
  <metadata_license>CC0-1.0</metadata_license>
  <name>@APP_NAME@</name>
  <summary>@APP_NAME@</summary>
  <description>
    <p>@APP_NAME@</p>
  </description>
  <launchable type="desktop-id">@APP_ID@.desktop</launchable>
  <translation type="gettext">@GETTEXT_DOMAIN@</translation>
  <releases>
    <release version="@APP_VERSION@"/>
  </releases>
</component>
"""

GRESOURCE_IN = """<?xml version="1.0" encoding="UTF-8"?>
<gresources>
  <gresource prefix="/@GRESOURCE_ID@/">
    <file compressed="true" preprocess="xml-stripblanks">window.ui</file>
    <file compressed="true">style.css</file>
  </gresource>
</gresources>
"""

GSCHEMA_IN = """<?xml version="1.0" encoding="UTF-8"?>
<schemalist gettext-domain="@GETTEXT_DOMAIN@">
  <schema id="@APP_ID@" path="/@GRESOURCE_ID@/">
    <key name="window-width" type="i">
      <default>600</default>
      <summary>Default window width</summary>
    </key>
    <key name="window-height" type="i">
      <default>400</default>
      <summary>Default window height</summary>
    </key>
  </schema>
</schemalist>
"""

WINDOW_UI = """<?xml version="1.0" encoding="UTF-8"?>
<interface>
  <object class="GtkApplicationWindow" id="window">
    <property name="default-width">600</property>
    <property name="default-height">400</property>
    <child>
      <object class="GtkLabel" id="label">
        <property name="label" translatable="yes">Hello World!</property>
      </object>
    </child>
  </object>
</interface>
"""

STYLE_CSS = """label {
  font-size: 2em;
}
"""


def _toml_string(value: str) -> str:
    # json strings are valid toml basic strings
    return json.dumps(value, ensure_ascii=False)


def _rewrite_manifest(manifest_path: str, project: NewProject) -> None:
    """Add the gtk dependencies and the gtkpkg section to what cargo generated."""
    contents = PathUtils.read_text(manifest_path)

    if "[dependencies]\n" in contents:
        contents = contents.replace(
            "[dependencies]\n", f"[dependencies]\n{DEPENDENCIES}", 1
        )
    else:
        contents = f"{contents.rstrip()}\n\n[dependencies]\n{DEPENDENCIES}"

    contents += fill_template(
        METADATA,
        {
            "@SECTION@": METADATA_SECTION,
            "@APP_ID@": _toml_string(project.app_id),
            "@APP_NAME@": _toml_string(project.name),
        },
    )

    logger.info('Writing "%s"', manifest_path)
    PathUtils.write_text(manifest_path, contents)


def get_project_files(project: NewProject) -> Dict[str, str]:
    """Relative paths and contents of everything written after cargo new."""
    app_id = project.app_id
    return {
        os.path.join("src", "main.rs"): MAIN_RS,
        os.path.join("data", f"{app_id}.desktop.in"): DESKTOP_IN,
        os.path.join("data", f"{app_id}.appdata.xml.in"): APPDATA_IN,
        os.path.join("data", f"{app_id}.gresource.xml.in"): GRESOURCE_IN,
        os.path.join("data", f"{app_id}.gschema.xml.in"): GSCHEMA_IN,
        os.path.join("data", "resources", "window.ui"): WINDOW_UI,
        os.path.join("data", "resources", "style.css"): STYLE_CSS,
        os.path.join("po", "LINGUAS"): "",
        os.path.join("po", "POTFILES.in"): "",
    }


def create_project(project: NewProject, parent_dir: str, runner: ToolRunner) -> str:
    """Create the project in parent_dir/<binary>. Returns its path.

    cargo refuses to create the project if the directory exists already.
    """
    root = os.path.join(parent_dir, project.binary)

    logger.step("Creating %s", project.binary)
    runner.run(Command(CARGO, ("new", project.binary), cwd=parent_dir))

    _rewrite_manifest(os.path.join(root, MANIFEST_NAME), project)

    for relative_path, contents in get_project_files(project).items():
        path = os.path.join(root, relative_path)
        logger.info('Writing "%s"', path)
        PathUtils.write_text(path, contents)

    return root
